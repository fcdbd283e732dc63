"""
Diagram heuristics — keyword-driven SVG diagrams for geometry/physics/circuit
worksheets.

Two steps:

  needs_diagrams(subject, topic) -> bool
    Whether the request's subject or topic mentions a visual topic at all.

  add_diagrams(questions) -> list[Question]
    Per-question classification. The triangle, circle and circuit checks are
    independent and run in that order, so a later match replaces an earlier
    diagram for the same question.

Only the extracted labels vary between diagrams; geometry and styling are
fixed.
"""
from __future__ import annotations

import logging
import re

from worksheet_ai.models.worksheet import Question

logger = logging.getLogger(__name__)

DIAGRAM_KEYWORDS: tuple[str, ...] = (
    "geometry", "triangle", "circle", "angle", "polygon", "area", "perimeter",
    "circuit", "electrical", "resistor", "voltage", "current",
    "physics", "force", "motion", "vector",
    "trigonometry", "sine", "cosine", "tangent",
)

_TRIANGLE_KEYWORDS = (
    "triangle", "△", "law of cosines", "law of sines", "cosine rule", "sine rule",
)
_CIRCLE_KEYWORDS = ("circle", "radius")
_CIRCUIT_KEYWORDS = ("circuit", "resistor")

_SIDE_RE = re.compile(r"[abc]\s*=\s*(\d+)")
_RADIUS_RE = re.compile(r"radius\s*(?:of|is|=)?\s*(\d+)")

_TRIANGLE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 180" width="200" height="180">
  <polygon points="100,20 30,160 170,160" fill="none" stroke="#0d9488" stroke-width="2.5"/>
  <text x="100" y="12" text-anchor="middle" font-size="14" font-weight="bold" fill="#1e293b">A</text>
  <text x="20" y="175" text-anchor="middle" font-size="14" font-weight="bold" fill="#1e293b">B</text>
  <text x="180" y="175" text-anchor="middle" font-size="14" font-weight="bold" fill="#1e293b">C</text>
  <text x="55" y="85" text-anchor="middle" font-size="13" fill="#0f766e">{a}</text>
  <text x="145" y="85" text-anchor="middle" font-size="13" fill="#0f766e">{b}</text>
  <text x="100" y="178" text-anchor="middle" font-size="13" fill="#0f766e">{c}</text>
</svg>"""

_CIRCLE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200" width="200" height="200">
  <circle cx="100" cy="100" r="70" fill="none" stroke="#0d9488" stroke-width="2.5"/>
  <circle cx="100" cy="100" r="3" fill="#0d9488"/>
  <line x1="100" y1="100" x2="170" y2="100" stroke="#f97316" stroke-width="2" stroke-dasharray="5,3"/>
  <text x="100" y="95" text-anchor="middle" font-size="12" fill="#1e293b">O</text>
  <text x="135" y="95" text-anchor="middle" font-size="13" font-weight="bold" fill="#f97316">r = {radius}</text>
</svg>"""

_CIRCUIT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 240 120" width="240" height="120">
  <rect x="20" y="30" width="200" height="60" fill="none" stroke="#0d9488" stroke-width="2"/>
  <rect x="80" y="25" width="30" height="10" fill="#f97316" stroke="#ea580c" stroke-width="1"/>
  <text x="95" y="20" text-anchor="middle" font-size="10" fill="#1e293b">R₁</text>
  <rect x="130" y="25" width="30" height="10" fill="#f97316" stroke="#ea580c" stroke-width="1"/>
  <text x="145" y="20" text-anchor="middle" font-size="10" fill="#1e293b">R₂</text>
  <text x="30" y="65" font-size="14" fill="#1e293b">+</text>
  <text x="200" y="65" font-size="14" fill="#1e293b">−</text>
  <text x="120" y="110" text-anchor="middle" font-size="11" fill="#64748b">Series Circuit</text>
</svg>"""


def needs_diagrams(subject: str, topic: str) -> bool:
    subject = subject.lower()
    topic = topic.lower()
    return any(kw in topic or kw in subject for kw in DIAGRAM_KEYWORDS)


def is_triangle_question(text: str) -> bool:
    lowered = text.lower()
    if any(kw in lowered for kw in _TRIANGLE_KEYWORDS):
        return True
    return "sides" in lowered and "angle" in lowered


def is_circle_question(text: str) -> bool:
    lowered = text.lower()
    return any(kw in lowered for kw in _CIRCLE_KEYWORDS)


def is_circuit_question(text: str) -> bool:
    lowered = text.lower()
    return any(kw in lowered for kw in _CIRCUIT_KEYWORDS)


def triangle_svg(question: str) -> str:
    """Labelled triangle; side labels come from "a = 3"-style values when all three are present."""
    a, b, c = "a", "b", "c"
    sides = _SIDE_RE.findall(question)
    if len(sides) >= 3:
        a, b, c = sides[0], sides[1], sides[2]
    return _TRIANGLE_SVG.format(a=a, b=b, c=c)


def circle_svg(question: str) -> str:
    radius = "r"
    match = _RADIUS_RE.search(question.lower())
    if match:
        radius = match.group(1)
    return _CIRCLE_SVG.format(radius=radius)


def circuit_svg(question: str) -> str:
    return _CIRCUIT_SVG


def add_diagrams(questions: list[Question]) -> list[Question]:
    """Attach an SVG to every question without an image whose text calls for one."""
    for i, q in enumerate(questions):
        if q.image:
            continue

        if is_triangle_question(q.question):
            q.image = triangle_svg(q.question)
            logger.info("Added triangle SVG for question %d", i + 1)

        if is_circle_question(q.question):
            q.image = circle_svg(q.question)
            logger.info("Added circle SVG for question %d", i + 1)

        if is_circuit_question(q.question):
            q.image = circuit_svg(q.question)
            logger.info("Added circuit SVG for question %d", i + 1)

    return questions
