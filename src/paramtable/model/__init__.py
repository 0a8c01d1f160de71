"""
The MODEL layer contains pure data structures and file I/O.
It has NO knowledge of the command line.
It deals with Parameters, Tables, Motion formulas, and I/O.
"""
