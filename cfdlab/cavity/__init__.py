"""Lid-driven cavity solver over a block-decomposed staggered grid."""