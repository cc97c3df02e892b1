"""
The MODEL layer contains pure data structures and the rendering pipeline.
It has NO knowledge of the GUI (Qt) or the terminal.
It deals with Quantization, Rotation, Timing and Image I/O.
"""
