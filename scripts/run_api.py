#!/usr/bin/env python3
"""
FastAPIサーバーを起動するエントリポイント

Usage:
  python scripts/run_api.py [--host 0.0.0.0] [--port 8000] [--no-reload]
"""
import argparse
import sys
from pathlib import Path

# プロジェクトルートをPYTHONPATHに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from infrastructure.settings.env_settings import AppSettings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the job XML API")
    parser.add_argument("--host", type=str, default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto reload")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
        reload=not args.no_reload,  # 開発時の自動リロード
    )


if __name__ == "__main__":
    main()
