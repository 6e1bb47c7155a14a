"""Export Formats — renders skills, projects or the whole portfolio as text documents.

Invariants:
    - Every renderer is total over well-formed input: empty collections give a
      well-formed document with zero entries (CSV keeps its header row)
    - Values containing delimiter or markup characters are quoted or escaped,
      never dropped
    - XML output is always well-formed: code points XML 1.0 forbids are
      stripped from text and attribute values
    - Rendering never alters an entity; the models are frozen
    - Any renderer failure surfaces as ExportError carrying the format

Design Decisions:
    - Standard library writers (json, csv, xml.etree) instead of string
      templates: quoting and escaping come from the writer
    - `exported_at` is a parameter so documents are reproducible in tests
    - size in the payload is the UTF-8 byte length of the content
"""

import csv
import functools
import io
import json
import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from portfolio_mcp.core.domain_types import FILE_EXTENSIONS, MIME_TYPES, ExportFormat
from portfolio_mcp.core.errors import ExportError, PortfolioError
from portfolio_mcp.core.portfolio_queries import project_stats, skill_stats
from portfolio_mcp.schemas.portfolio import Portfolio, Project, Skill

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]<>|#])")
# Code points XML 1.0 cannot carry, even escaped
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _wrap_failures(render: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(render)
    def wrapper(items: Any, fmt: ExportFormat | str, *args: Any, **kwargs: Any) -> str:
        label = str(getattr(fmt, "value", fmt))
        try:
            return render(items, ExportFormat(fmt), *args, **kwargs)
        except PortfolioError:
            raise
        except Exception as exc:
            raise ExportError(label, str(exc) or type(exc).__name__) from exc
    return wrapper


def escape_markdown(text: Any) -> str:
    """Backslash-escape inline markup characters."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", str(text))


def to_json(data: Any, compress: bool = False) -> str:
    if compress:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(data, ensure_ascii=False, indent=2)


def _csv(header: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows([[_cell(value) for value in row] for row in rows])
    return buffer.getvalue()


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(getattr(value, "value", value))


def _xml_safe(text: str) -> str:
    return _XML_ILLEGAL.sub("", text)


def _xml(root: ET.Element) -> str:
    for element in root.iter():
        if element.text:
            element.text = _xml_safe(element.text)
        for name, value in list(element.attrib.items()):
            element.set(name, _xml_safe(value))
    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def _sub(parent: ET.Element, tag: str, value: Any) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = _cell(value)
    return element


def _stamp(exported_at: datetime | None) -> str:
    return (exported_at or datetime.now(timezone.utc)).isoformat()


def _plain_number(value: float) -> str:
    return f"{value:g}"


# ─── Skills ──────────────────────────────────────────────────────

@_wrap_failures
def render_skills(
    skills: Sequence[Skill],
    fmt: ExportFormat,
    include_stats: bool = True,
    exported_at: datetime | None = None,
) -> str:
    match fmt:
        case ExportFormat.JSON:
            document: dict[str, Any] = {"skills": [s.to_wire() for s in skills]}
            if include_stats:
                document["stats"] = skill_stats(skills)
            document["exportedAt"] = _stamp(exported_at)
            return to_json(document)
        case ExportFormat.CSV:
            return _csv(
                ["Name", "Category", "Level", "Proficiency",
                 "Experience Years", "Projects", "Description"],
                [
                    [s.name, s.category, s.level, _plain_number(s.proficiency),
                     _plain_number(s.years_of_experience), s.project_count, s.description]
                    for s in skills
                ],
            )
        case ExportFormat.MARKDOWN:
            return _skills_markdown(skills, include_stats)
        case ExportFormat.XML:
            root = ET.Element("skills", exportedAt=_stamp(exported_at))
            for s in skills:
                _skill_element(root, s)
            return _xml(root)


def _skills_markdown(skills: Sequence[Skill], include_stats: bool) -> str:
    lines = ["# Skills Export", ""]
    if include_stats:
        stats = skill_stats(skills)
        lines += [
            "## Statistics",
            f"- **Total Skills**: {stats['total']}",
            f"- **Average Proficiency**: {stats['averageProficiency']}%",
            f"- **Total Experience**: {_plain_number(stats['totalExperience'])} years",
            f"- **Total Projects**: {stats['totalProjects']}",
            "",
        ]
    lines += ["## Skills List", ""]
    for s in skills:
        lines += [
            f"### {escape_markdown(s.name)}",
            f"- **Category**: {s.category.value}",
            f"- **Level**: {s.level.value}",
            f"- **Proficiency**: {_plain_number(s.proficiency)}%",
            f"- **Experience**: {_plain_number(s.years_of_experience)} years",
            f"- **Projects**: {s.project_count}",
            f"- **Description**: {escape_markdown(s.description)}",
            "",
        ]
    return "\n".join(lines)


def _skill_element(parent: ET.Element, skill: Skill) -> None:
    element = ET.SubElement(parent, "skill", id=skill.id)
    _sub(element, "name", skill.name)
    _sub(element, "category", skill.category)
    _sub(element, "level", skill.level)
    _sub(element, "proficiency", _plain_number(skill.proficiency))
    _sub(element, "yearsOfExperience", _plain_number(skill.years_of_experience))
    _sub(element, "description", skill.description)


# ─── Projects ────────────────────────────────────────────────────

@_wrap_failures
def render_projects(
    projects: Sequence[Project],
    fmt: ExportFormat,
    exported_at: datetime | None = None,
) -> str:
    match fmt:
        case ExportFormat.JSON:
            return to_json({
                "projects": [p.to_wire() for p in projects],
                "stats": project_stats(projects),
                "exportedAt": _stamp(exported_at),
            })
        case ExportFormat.CSV:
            return _csv(
                ["Title", "Category", "Status", "Year", "Featured",
                 "Views", "Likes", "Technologies", "Description"],
                [
                    [p.title, p.category, p.status, p.year, p.featured,
                     p.views, p.likes, ", ".join(p.technologies), p.short_description]
                    for p in projects
                ],
            )
        case ExportFormat.MARKDOWN:
            return _projects_markdown(projects)
        case ExportFormat.XML:
            root = ET.Element("projects", exportedAt=_stamp(exported_at))
            for p in projects:
                _project_element(root, p)
            return _xml(root)


def _projects_markdown(projects: Sequence[Project]) -> str:
    lines = ["# Projects Export", ""]
    for p in projects:
        lines += [
            f"## {escape_markdown(p.title)}",
            escape_markdown(p.description),
            "",
            f"- **Category**: {p.category.value}",
            f"- **Year**: {p.year}",
            f"- **Status**: {p.status.value}",
            f"- **Featured**: {'Yes' if p.featured else 'No'}",
            f"- **Technologies**: {escape_markdown(', '.join(p.technologies))}",
            f"- **Views**: {p.views}",
            f"- **Likes**: {p.likes}",
        ]
        if p.live_url:
            lines.append(f"- **Live URL**: <{p.live_url}>")
        if p.github_url:
            lines.append(f"- **GitHub**: <{p.github_url}>")
        lines.append("")
    return "\n".join(lines)


def _project_element(parent: ET.Element, project: Project) -> None:
    element = ET.SubElement(parent, "project", id=project.id)
    _sub(element, "title", project.title)
    _sub(element, "category", project.category)
    _sub(element, "status", project.status)
    _sub(element, "year", project.year)
    _sub(element, "featured", project.featured)
    _sub(element, "views", project.views)
    _sub(element, "likes", project.likes)
    technologies = ET.SubElement(element, "technologies")
    for tech in project.technologies:
        _sub(technologies, "technology", tech)
    _sub(element, "description", project.description)
    if project.images:
        images = ET.SubElement(element, "images")
        for image in project.images:
            ET.SubElement(images, "image", url=image.url, alt=image.alt)


# ─── Portfolio ───────────────────────────────────────────────────

@_wrap_failures
def render_portfolio(
    portfolio: Portfolio,
    fmt: ExportFormat,
    compress: bool = False,
    exported_at: datetime | None = None,
) -> str:
    match fmt:
        case ExportFormat.JSON:
            return to_json(portfolio.to_wire(), compress=compress)
        case ExportFormat.CSV:
            rows = [
                ["Skill", s.name, s.category, s.description, "", s.level]
                for s in portfolio.skills
            ] + [
                ["Project", p.title, p.category, p.short_description, p.year, p.status]
                for p in portfolio.projects
            ]
            return _csv(["Type", "Name", "Category", "Description", "Year", "Status"], rows)
        case ExportFormat.MARKDOWN:
            return _portfolio_markdown(portfolio, exported_at)
        case ExportFormat.XML:
            root = ET.Element("portfolio", id=portfolio.id)
            _sub(root, "title", portfolio.title)
            _sub(root, "description", portfolio.description)
            contact = ET.SubElement(root, "contact")
            _sub(contact, "email", portfolio.contact.email)
            if portfolio.contact.phone:
                _sub(contact, "phone", portfolio.contact.phone)
            skills = ET.SubElement(root, "skills")
            for s in portfolio.skills:
                _skill_element(skills, s)
            projects = ET.SubElement(root, "projects")
            for p in portfolio.projects:
                _project_element(projects, p)
            return _xml(root)


def _portfolio_markdown(portfolio: Portfolio, exported_at: datetime | None) -> str:
    contact = portfolio.contact
    lines = [
        f"# {escape_markdown(portfolio.title)}",
        "",
        escape_markdown(portfolio.description),
        "",
        "## Contact Information",
        f"- **Email**: {escape_markdown(contact.email)}",
    ]
    if contact.phone:
        lines.append(f"- **Phone**: {escape_markdown(contact.phone)}")
    if contact.location:
        lines.append(f"- **Location**: {escape_markdown(contact.location)}")
    if contact.website:
        lines.append(f"- **Website**: <{contact.website}>")
    lines += ["", f"## Skills ({len(portfolio.skills)})"]
    lines += [
        f"- **{escape_markdown(s.name)}** ({s.level.value}, "
        f"{_plain_number(s.proficiency)}%) - {escape_markdown(s.description)}"
        for s in portfolio.skills
    ]
    lines += ["", f"## Projects ({len(portfolio.projects)})"]
    for p in portfolio.projects:
        lines += [
            f"### {escape_markdown(p.title)}",
            escape_markdown(p.description),
            f"- **Category**: {p.category.value}",
            f"- **Year**: {p.year}",
            f"- **Technologies**: {escape_markdown(', '.join(p.technologies))}",
        ]
        if p.live_url:
            lines.append(f"- **Live URL**: <{p.live_url}>")
        lines.append("")
    lines += ["---", f"*Exported on {_stamp(exported_at)}*", ""]
    return "\n".join(lines)


# ─── Payload ─────────────────────────────────────────────────────

def export_payload(
    content: str, fmt: ExportFormat | str, basename: str,
) -> dict[str, Any]:
    """Labeled export result: content plus format, MIME type, filename and byte size."""
    fmt = ExportFormat(fmt)
    return {
        "content": content,
        "format": fmt.value,
        "mimeType": MIME_TYPES[fmt],
        "filename": f"{basename}.{FILE_EXTENSIONS[fmt]}",
        "size": len(content.encode("utf-8")),
    }
