"""Parameter reading for thermally coupled flow problems."""