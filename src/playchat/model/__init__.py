"""
The MODEL layer contains the cipher, the on-disk message cache and the
conversation state.
Apart from the conversation store signals it has NO knowledge of the GUI.
"""
