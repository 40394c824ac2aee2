DEFAULTS = {
    # Vertex type for vertices added without an explicit type ("basic" | "looped")
    "DEFAULT_VERTEX_TYPE": "basic",
    # Fail fast when the vertex set changes while an iterator is active
    "STRICT_ITERATION": True,
}
