"""Render helpers for each section of the portfolio document.

The document is treated as loosely structured data: missing sections render
nothing and missing fields render as blanks.
"""
from __future__ import annotations

import html
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .icons import ACHIEVEMENT_ICONS, CONTACT_ICONS, SKILL_GROUP_ICONS, STAT_ICONS, tech_badge
from .markup import to_html
from .palette import Palette, gradient_colors, gradient_css


def section_items(document: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    """Return the mapping entries listed under ``key`` (empty when absent)."""

    raw = document.get(key) if isinstance(document, Mapping) else None
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        return []
    return [item for item in raw if isinstance(item, Mapping)]


def _text(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key)
    return "" if value is None else str(value)


def _strings(item: Mapping[str, Any], key: str) -> list[str]:
    raw = item.get(key)
    if not isinstance(raw, Iterable) or isinstance(raw, (str, bytes)):
        return []
    return [str(value) for value in raw]


def _level(item: Mapping[str, Any]) -> int:
    try:
        level = int(float(item.get("level", 0) or 0))
    except (TypeError, ValueError):
        return 0
    return min(max(level, 0), 100)


def _heading(title: str) -> None:
    st.markdown(f"<h2 class='portfolio-heading'>{html.escape(title)}</h2>", unsafe_allow_html=True)


def _card(body: str) -> None:
    st.markdown(f"<div class='portfolio-card'>{body}</div>", unsafe_allow_html=True)


def _bullets(lines: Iterable[str]) -> str:
    items = "".join(f"<li>{to_html(line)}</li>" for line in lines)
    return f"<ul>{items}</ul>" if items else ""


def render_profile(document: Mapping[str, Any]) -> None:
    info = document.get("personalInfo") if isinstance(document, Mapping) else None
    if not isinstance(info, Mapping):
        return
    photo_col, text_col = st.columns([1, 5])
    with photo_col:
        photo = _text(info, "photo")
        if photo:
            st.image(photo, width=96)
    with text_col:
        st.markdown(f"# {_text(info, 'name')}")
        st.markdown(f"<h3 class='portfolio-heading'>{html.escape(_text(info, 'title'))}</h3>", unsafe_allow_html=True)

    contacts = section_items(info, "contacts")
    if not contacts:
        return
    columns = st.columns(len(contacts))
    for column, contact in zip(columns, contacts):
        with column:
            icon = CONTACT_ICONS.resolve(_text(contact, "type"))
            value = _text(contact, "value")
            href = _text(contact, "href")
            st.markdown(f"{icon} [{value}]({href})" if href else f"{icon} {value}")


def render_stats(document: Mapping[str, Any]) -> None:
    stats = section_items(document, "stats")
    if not stats:
        return
    columns = st.columns(len(stats))
    for column, stat in zip(columns, stats):
        with column:
            icon = STAT_ICONS.resolve(_text(stat, "icon"))
            st.metric(
                label=f"{icon} {_text(stat, 'label')}",
                value=f"{_text(stat, 'value')}{_text(stat, 'suffix')}",
            )


def render_education(document: Mapping[str, Any]) -> None:
    education = section_items(document, "education")
    if not education:
        return
    _heading("🎓 Education")
    for entry in education:
        _card(
            f"<strong>{html.escape(_text(entry, 'degree'))}</strong><br>"
            f"{html.escape(_text(entry, 'institution'))}<br>"
            f"<span class='portfolio-muted'>{html.escape(_text(entry, 'location'))}"
            f" · {html.escape(_text(entry, 'period'))}</span>"
        )


def render_experience(document: Mapping[str, Any]) -> None:
    experience = section_items(document, "experience")
    if not experience:
        return
    _heading("💼 Experience")
    for job in experience:
        _card(
            f"<strong>{html.escape(_text(job, 'position'))}</strong> · "
            f"{html.escape(_text(job, 'company'))}<br>"
            f"<span class='portfolio-muted'>{html.escape(_text(job, 'location'))}"
            f" · {html.escape(_text(job, 'period'))}</span>"
            f"{_bullets(_strings(job, 'responsibilities'))}"
        )


def build_skill_progress_figure(skills: Sequence[Mapping[str, Any]], palette: Palette) -> go.Figure:
    """Horizontal bar chart with one bar per skill, colored by its gradient start."""

    names = [_text(skill, "name") for skill in skills]
    levels = [_level(skill) for skill in skills]
    colors = [gradient_colors(_text(skill, "color"))[0] for skill in skills]
    fig = go.Figure(
        go.Bar(
            x=levels,
            y=names,
            orientation="h",
            marker_color=colors,
            text=[f"{level}%" for level in levels],
            textposition="auto",
        )
    )
    fig.update_layout(
        template=palette.chart_template,
        xaxis={"range": [0, 100], "showgrid": False, "visible": False},
        yaxis={"autorange": "reversed"},
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        height=max(120, 48 * len(skills)),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def render_skill_progress(document: Mapping[str, Any], palette: Palette) -> None:
    skills = section_items(document, "skillProgress")
    if not skills:
        return
    _heading("📈 Skill Progress")
    st.plotly_chart(build_skill_progress_figure(skills, palette), config={"displayModeBar": False})


def render_achievements(document: Mapping[str, Any]) -> None:
    achievements = section_items(document, "achievements")
    if not achievements:
        return
    _heading("🏆 Achievements")
    for achievement in achievements:
        icon = ACHIEVEMENT_ICONS.resolve(_text(achievement, "icon"))
        bar = gradient_css(_text(achievement, "color"), ("#f97316", "#ea580c"))
        _card(
            f"<div class='portfolio-bar' style='background: {bar}'></div>"
            f"<strong>{icon} {html.escape(_text(achievement, 'title'))}</strong><br>"
            f"{to_html(_text(achievement, 'description'))}"
        )


def _tech_badges(techs: Iterable[str]) -> str:
    badges = []
    for tech in techs:
        badge = tech_badge(tech)
        badges.append(
            f"<span style='color: {badge.color}; margin-right: 0.75rem'>"
            f"{badge.icon} {html.escape(tech)}</span>"
        )
    return "".join(badges)


def render_ai_projects(document: Mapping[str, Any]) -> None:
    projects = section_items(document, "aiProjects")
    if not projects:
        return
    _heading("🤖 AI Projects")
    for project in projects:
        icon = ACHIEVEMENT_ICONS.resolve(_text(project, "icon"))
        bar = gradient_css(_text(project, "gradient"))
        _card(
            f"<div class='portfolio-bar' style='background: {bar}'></div>"
            f"<strong>{icon} {html.escape(_text(project, 'title'))}</strong><br>"
            f"{_tech_badges(_strings(project, 'techs'))}"
            f"{_bullets(_strings(project, 'highlights'))}"
        )


def render_projects(document: Mapping[str, Any]) -> None:
    projects = section_items(document, "projects")
    if not projects:
        return
    _heading("💼 Key Projects")
    for index, project in enumerate(projects):
        title = f"{_text(project, 'title')} · {_text(project, 'period')}"
        with st.expander(title, expanded=index == 0):
            st.markdown(_tech_badges(_strings(project, "techs")), unsafe_allow_html=True)
            st.markdown(_bullets(_strings(project, "highlights")), unsafe_allow_html=True)


def skills_frame(skills: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Tabular view of a skill group, one row per skill."""

    return pd.DataFrame(
        {
            "Skill": [_text(skill, "name") for skill in skills],
            "Level": [_level(skill) for skill in skills],
        },
        columns=["Skill", "Level"],
    )


def render_technical_skills(document: Mapping[str, Any]) -> None:
    groups = section_items(document, "technicalSkills")
    if not groups:
        return
    _heading("🎯 Technical Proficiency")
    for group in groups:
        icon = SKILL_GROUP_ICONS.resolve(_text(group, "icon"))
        with st.expander(f"{icon} {_text(group, 'title')}"):
            st.dataframe(
                skills_frame(section_items(group, "skills")),
                hide_index=True,
                column_config={
                    "Level": st.column_config.ProgressColumn(
                        "Level", min_value=0, max_value=100, format="%d%%"
                    )
                },
            )


__all__ = [
    "section_items",
    "render_profile",
    "render_stats",
    "render_education",
    "render_experience",
    "build_skill_progress_figure",
    "render_skill_progress",
    "render_achievements",
    "render_ai_projects",
    "render_projects",
    "skills_frame",
    "render_technical_skills",
]
