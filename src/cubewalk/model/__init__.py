"""
The MODEL layer contains pure data structures and input handling.
It has NO knowledge of cube folding or of how the walker moves.
It deals with Tiles, Points, Directions and the puzzle text.
"""
