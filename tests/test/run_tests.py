"""
테스트 실행 스크립트

사용법:
    python tests/test/run_tests.py                                  # 전체
    python tests/test/run_tests.py --cov                            # 커버리지 포함
    python tests/test/run_tests.py --file test_segment_service.py   # 특정 파일만
"""

import sys
import subprocess
import argparse
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


def build_command(args) -> list:
    target = f"tests/test/{args.file}" if args.file else "tests/test/"
    cmd = ["pytest", target, "-v"]

    if args.cov:
        cmd.extend(["--cov=metro_segment", "--cov-report=term-missing"])

    return cmd


def main():
    parser = argparse.ArgumentParser(description="Metro Segment 테스트 실행")
    parser.add_argument("--cov", action="store_true", help="코드 커버리지 측정")
    parser.add_argument("--file", type=str, help="특정 테스트 파일만 실행")
    args = parser.parse_args()

    cmd = build_command(args)
    print(f"🧪 실행 명령어: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=PROJECT_ROOT)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
