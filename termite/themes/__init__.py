"""Colour themes, their validation and the styles derived from them."""