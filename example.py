#!/usr/bin/env python3
"""
Example usage of the JSON Struct Mapper.

This script demonstrates loading JSON into records, editing fields,
converting back to JSON and building a blank template from a sample.
"""

import json
import logging
import tempfile
from pathlib import Path
import json_struct_mapper


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("JSON Struct Mapper Example")
    print("=" * 50)

    sample_data = {
        "user": {
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "profile": {
                "age": 30,
                "city": "New York",
                "interests": ["reading", "hiking"]
            },
            "nickname": None
        },
        "posts": [
            {"id": 1, "title": "My First Post", "tags": ["introduction"]},
            {"id": 2, "title": "Hiking Trip", "tags": ["outdoors"]}
        ]
    }

    converter = json_struct_mapper.from_hash(sample_data)
    user = converter.object.user

    print(f"Name: {user.name}")
    print(f"City: {user.profile.city}")
    print(f"Post titles: {[post.title for post in converter.object.posts]}")

    user.profile.city = "Boston"
    print("\nCompact JSON (nulls removed):")
    print(converter.to_json())

    print("\nFull mapping (nulls kept):")
    print(converter.to_hash(compact=False))

    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "sample.json"
        path.write_text(json.dumps(sample_data), encoding="utf-8")

        template = json_struct_mapper.from_file_as_template(path, key="user")
        print("\nBlank template of 'user':")
        print(json.dumps(template.to_hash(compact=False), indent=2))

    try:
        json_struct_mapper.from_json('{"a": 1}', key="b")
    except json_struct_mapper.InvalidKeyError as e:
        print(f"\nExpected error: {e}")


if __name__ == "__main__":
    main()
