"""
Export helpers for generated scripts.

Pure serialization: spreadsheet rows, CSV, JSON and a Notion-style
markdown document.
"""

import csv
import io
import json
from typing import Iterable

from .models import ScriptContent

CSV_COLUMNS = [
    "id",
    "title",
    "topic",
    "status",
    "date",
    "hook_visual_desc",
    "duration",
    "cta_placement",
    "caption_seo",
    "hashtags",
]


def _date(script: ScriptContent) -> str:
    return script.timestamp.strftime("%d/%m/%Y")


def script_to_sheet_row(script: ScriptContent) -> str:
    """Format a script as one tab-separated row for pasting into a sheet."""
    row = [
        script.id,
        script.title,
        script.topic,
        "Scripted",
        _date(script),
        script.hook_visual_desc,
        script.duration.label,
    ]
    return "\t".join(cell.replace("\t", " ").replace("\n", " ") for cell in row)


def scripts_to_csv(scripts: Iterable[ScriptContent]) -> str:
    """Export scripts as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for script in scripts:
        writer.writerow([
            script.id,
            script.title,
            script.topic,
            "Scripted",
            _date(script),
            script.hook_visual_desc,
            script.duration.label,
            script.cta_placement.label,
            script.caption_seo,
            " ".join(script.hashtags),
        ])
    return buffer.getvalue()


def scripts_to_json(scripts: Iterable[ScriptContent]) -> str:
    """Export scripts as a JSON array."""
    data = [s.model_dump(mode="json") for s in scripts]
    return json.dumps(data, ensure_ascii=False, indent=2)


def script_to_markdown(script: ScriptContent) -> str:
    """Format a script as a Notion-style markdown document."""
    lines = [
        f"# {script.title}",
        f"**Tópico:** {script.topic}",
        f"**Data:** {_date(script)}",
        f"**Duração:** {script.duration.label}",
        "",
        "## 🎥 Gancho Visual",
        f"**Texto Tela:** {script.video_start_text}",
        f"**Visual:** {script.hook_visual_desc}",
        f"**Prompt Veo:** {script.veo_prompt}",
        f"**Gancho Alternativo:** {script.alternative_hook}",
        "",
        f"## ⚡ CTA ({script.cta_placement.label})",
        script.cta_text,
        "",
    ]

    if script.script_scenes:
        lines.extend([
            "## 📝 Roteiro (Tabela)",
            "| Tempo | Visual (Tela) | Áudio (Locução) |",
            "| :--- | :--- | :--- |",
        ])
        for scene in script.script_scenes:
            lines.append(
                f"| {scene.time_segment} | {scene.visual_cue} | {scene.audio_narration} |"
            )
        lines.append("")
    elif script.main_content:
        lines.extend(["## 📝 Roteiro", script.main_content, ""])

    lines.extend([
        "## 🔚 Encerramento",
        script.outro,
        "",
        "## 🏷️ Metadados",
        f"**Legenda:** {script.caption_seo}",
        f"**Hashtags:** {' '.join(script.hashtags)}",
    ])

    if script.generated_image_url:
        lines.append("**Imagem do gancho:** gerada")

    return "\n".join(lines)
