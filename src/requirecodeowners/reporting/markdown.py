"""GitHub Actionsのジョブサマリー向けMarkdownレポート。"""

from requirecodeowners.models.validation import ValidationError
from requirecodeowners.reporting.console import pluralize


def render_markdown(errors: list[ValidationError]) -> str:
    """エラー一覧をMarkdownの表に整形する。"""
    lines = [
        "## ❌ CODEOWNERS Check Failed",
        "",
        "| Path | Issue |",
        "|------|-------|",
    ]
    for e in errors:
        # 表のセルを壊さないようにパイプをエスケープ
        message = e.message.replace("|", "\\|")
        lines.append(f"| `{e.path}` | {message} |")
    lines.append("")
    lines.append(f"**{len(errors)} {pluralize(len(errors), 'directory', 'directories')}** need attention.")
    return "\n".join(lines)
