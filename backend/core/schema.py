"""
Scene List Response Schema

Structured-output schema sent to Gemini with every request. Uses the
OpenAPI subset understood by the ``responseSchema`` generation option.
"""

SCENE_KEYS = [
    "scene_id",
    "setting",
    "time",
    "location",
    "characters",
    "dialogue",
    "scene_length_seconds",
]

CHARACTER_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING"},
        "description": {"type": "STRING"},
    },
    "required": ["name", "description"],
}

SCENE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "scene_id": {"type": "INTEGER"},
        "setting": {"type": "STRING"},
        "time": {"type": "STRING"},
        "location": {"type": "STRING"},
        "characters": {"type": "ARRAY", "items": CHARACTER_SCHEMA},
        "dialogue": {"type": "STRING"},
        "scene_length_seconds": {"type": "INTEGER"},
    },
    "required": list(SCENE_KEYS),
}

SCENE_LIST_SCHEMA = {
    "type": "ARRAY",
    "items": SCENE_SCHEMA,
}
