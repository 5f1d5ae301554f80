# scripts/export_openapi.py
"""
Write the OpenAPI document to a file without running the server.

Usage example:
    python scripts/export_openapi.py openapi.json
"""

import json
import sys

from work_api.core.docs import build_openapi
from work_api.main import app, settings


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "openapi.json"
    spec = build_openapi(app, settings)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(spec, f, indent=2)
    print(f"Wrote {path}")


if __name__ == "__main__":
    main()
