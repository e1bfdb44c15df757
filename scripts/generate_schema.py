import json
import sys
from pathlib import Path

# Add src to path
current_dir = Path(__file__).parent
src_dir = current_dir.parent / "src"
sys.path.insert(0, str(src_dir))

from pydantic import TypeAdapter
from table_block_editor.types import TableAttributes


def main():
    adapter = TypeAdapter(TableAttributes)
    schema = adapter.json_schema()

    # Written next to the package so the host can validate block attributes
    schema_dir = current_dir.parent / "schemas"
    schema_dir.mkdir(exist_ok=True)

    output_file = schema_dir / "table-attributes.schema.json"

    with open(output_file, "w") as f:
        json.dump(schema, f, indent=2)

    print(f"Schema generated at: {output_file}")


if __name__ == "__main__":
    main()
