"""Application layer - the template executor and the visitor dispatcher."""
