"""
에러 메시지 부분 문자열 -> 조치 안내 블록.

드라이버/서버 에러 문구에 의존하는 best-effort 힌트일 뿐, 에러 분류 체계가 아님.
여러 개가 동시에 매칭될 수 있고 모두 출력한다.
"""
from typing import List, NamedTuple, Tuple


class Hint(NamedTuple):
    needle: str
    lines: Tuple[str, ...]


HINTS: Tuple[Hint, ...] = (
    Hint(
        "Tenant or user not found",
        (
            "1. Check if your Supabase project is active (not paused)",
            "2. Verify the database password is correct",
            "3. Check if the database user exists",
            "4. Try using the direct connection (not pooler):",
            "   Change port from 6543 (pooler) to 5432 (direct)",
        ),
    ),
    Hint(
        "password authentication failed",
        (
            "1. The database password might be incorrect",
            "2. Check your Supabase project settings",
        ),
    ),
    Hint(
        "does not exist",
        (
            "1. The database might not exist",
            "2. Check your Supabase project",
        ),
    ),
)


def match_hints(message: str) -> List[Hint]:
    if not message:
        return []
    return [h for h in HINTS if h.needle in message]


def format_hint(hint: Hint) -> str:
    return "\n".join(["", "🔍 Troubleshooting:", *hint.lines])
