"""
Skills: self-contained building blocks of the relevance engine.
"""
