#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""로컬 개발용 .env 파일 생성"""
import os
import sys
from pathlib import Path

# 프로젝트 루트
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"

# 주의: DB 계정 정보는 실제 값으로 직접 채워 넣어야 함
env_content = """# Database
DATABASE_URL=postgresql+asyncpg://<DB_USER>:<DB_PASSWORD>@localhost:5432/exam_answer_db
DATABASE_ECHO=false

# CORS
ALLOWED_ORIGINS=http://localhost:5173,http://localhost:3000

# Environment
# development: 상세 에러 메시지 및 DEBUG 로그
ENVIRONMENT=development

# 응시 가능 시간 밖의 응시 시작/제출 차단
ENFORCE_EXAM_WINDOW=true
"""


def create_env_file():
    """.env 파일 생성 (UTF-8, BOM 없음)"""
    print(f"[INFO] .env 파일 생성 중: {env_file}")

    # 기존 파일이 있으면 백업
    if env_file.exists():
        backup_file = project_root / ".env.backup"
        print(f"[INFO] 기존 .env 파일 백업: {backup_file}")
        backup_file.write_text(env_file.read_text(encoding="utf-8"), encoding="utf-8")

    with open(env_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(env_content)

    print(f"[OK] .env 파일 생성 완료: {env_file}")

    if os.name != "nt":
        os.chmod(env_file, 0o600)
        print("[INFO] 파일 권한 설정: 600")


if __name__ == "__main__":
    try:
        create_env_file()
        print("\n[OK] 작업 완료")
    except OSError as e:
        print(f"\n[ERROR] 에러 발생: {e.__class__.__name__}: {str(e)}")
        sys.exit(1)
