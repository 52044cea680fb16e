"""Core logic for the JSON Record Table Viewer.

The Gradio UI lives in `app.py`. This package contains the pieces it wires up:
- fetch the record list once per session
- infer table columns from the first record
- slice the records into pages
- expand a record's nested fields into a labeled hierarchy
"""
