"""コンソール(標準エラー)向けのレポート整形。"""

from requirecodeowners.models.validation import ValidationError

SUCCESS_MESSAGE = "✓ all directories have CODEOWNERS coverage"


def pluralize(n: int, singular: str, plural: str) -> str:
    if n == 1:
        return singular
    return plural


def render_console(errors: list[ValidationError]) -> str:
    """エラー一覧をコンソール表示用のテキストに整形する。"""
    lines = [""]
    for e in errors:
        lines.append(f"  ✗ {e.path}")
        lines.append(f"    {e.message}")
    lines.append("")
    lines.append(
        f"✗ {len(errors)} {pluralize(len(errors), 'directory', 'directories')} failed CODEOWNERS check"
    )
    return "\n".join(lines)
