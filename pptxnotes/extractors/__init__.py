"""
Notes Extraction Package
========================

    xml_tree          Typed document tree over ElementTree
    formatting        Run and paragraph flattening to inline markup
    notes_extractor   Notes-slide collection and ordering
    serialization     Persisted JSON payload
    util              Package reading, ZIP-bomb and encryption guards
"""
