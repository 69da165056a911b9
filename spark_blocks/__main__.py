"""
Ligne de commande :
  python -m spark_blocks import page.html   → ImportResult JSON
  python -m spark_blocks export doc.json    → document HTML complet
  python -m spark_blocks serve [port]       → API HTTP (uvicorn)
"""
import json
import logging
import sys
from pathlib import Path

from .core.config import LOG_LEVEL
from .core.schemas import Document
from .importer import import_html
from .renderer import export_html

USAGE = "usage: python -m spark_blocks import|export FILE  |  serve [PORT]"


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(message)s", stream=sys.stderr)

    if not argv:
        print(USAGE, file=sys.stderr)
        return 2
    command = argv[0]

    if command == "serve":
        import uvicorn
        port = int(argv[1]) if len(argv) > 1 else 8002
        uvicorn.run("spark_blocks.app:app", host="0.0.0.0", port=port)
        return 0

    if command not in ("import", "export") or len(argv) < 2:
        print(USAGE, file=sys.stderr)
        return 2

    text = Path(argv[1]).read_text(encoding="utf-8")
    if command == "import":
        result = import_html(text)
        print(result.model_dump_json(by_alias=True, indent=2))
        return 0

    doc = Document.model_validate(json.loads(text))
    print(export_html(doc.sections))
    return 0


if __name__ == "__main__":
    sys.exit(main())
