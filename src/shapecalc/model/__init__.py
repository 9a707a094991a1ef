"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the command line or of how results are printed.
It deals with Geometry, Aggregation, Rendering and I/O.
"""
