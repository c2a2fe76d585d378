"""
Script to run a marks memo through the verifier without starting the API.

Usage:
    python scripts/verify_marks_memo.py <path> [--mime-type TYPE]

Example:
    python scripts/verify_marks_memo.py dummy_data/memo.jpg
"""

import argparse
import asyncio
import json
import logging
import mimetypes
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from marks_memo_verifier import get_default_verifier, verify_marks_memo

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def main(path: str, mime_type: str) -> int:
    with open(path, "rb") as f:
        data = f.read()

    verifier = get_default_verifier()
    logger.info(f"Verifying {path} ({mime_type}, {len(data)} bytes) in {verifier.mode} mode")

    result = await verify_marks_memo(data, mime_type, verifier=verifier)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_valid else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Verify a marks memo image or PDF")
    parser.add_argument("path", help="Path to the marks memo")
    parser.add_argument("--mime-type", help="Media type (guessed from the file name if omitted)")
    args = parser.parse_args()

    if not os.path.exists(args.path):
        print(f"❌ File not found: {args.path}")
        sys.exit(2)

    mime_type = args.mime_type or mimetypes.guess_type(args.path)[0] or "application/octet-stream"
    sys.exit(asyncio.run(main(args.path, mime_type)))
