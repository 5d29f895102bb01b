#!/usr/bin/env python
"""
ATS 招聘管理系统后端启动脚本

用法:
    python run.py                    # 127.0.0.1:8000
    python run.py -p 8080 --reload   # 指定端口并开启热重载
    python run.py --host 0.0.0.0 --workers 4
"""
import argparse
import sys
from pathlib import Path

import uvicorn

ROOT_DIR = Path(__file__).parent
sys.path.insert(0, str(ROOT_DIR))

APP_PATH = "ats_recruitment.main:app"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="ATS 招聘管理系统后端")
    parser.add_argument("-p", "--port", type=int, default=8000, help="服务端口 (默认: 8000)")
    parser.add_argument("--host", default="127.0.0.1", help="服务地址 (默认: 127.0.0.1)")
    parser.add_argument("--reload", action="store_true", help="热重载，仅用于开发")
    parser.add_argument("--workers", type=int, default=1, help="工作进程数，热重载时固定为 1")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if not (ROOT_DIR / ".env").exists():
        print("未找到 .env，使用默认配置（SQLite 数据库位于 data/ats.db）")

    print(f"ATS 后端: http://{args.host}:{args.port}  (reload={args.reload}, workers={args.workers})")
    try:
        uvicorn.run(
            APP_PATH,
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=1 if args.reload else args.workers,
            log_level=args.log_level,
        )
    except KeyboardInterrupt:
        print("服务已停止")


if __name__ == "__main__":
    main()
