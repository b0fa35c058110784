"""Guard internals: signature, safe mode, parsing, dispatch and replies."""
