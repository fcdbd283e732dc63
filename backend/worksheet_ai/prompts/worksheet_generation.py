"""Prompt templates for worksheet generation and answer verification.

The generation prompt is the only channel of control over the model's
output shape. Any change to the question schema in
``worksheet_ai.models.worksheet`` must be mirrored in
``_OUTPUT_REQUIREMENTS`` below.
"""
from __future__ import annotations

from worksheet_ai.models.worksheet import WorksheetGeneratorInput

SYSTEM_PROMPT = r"""You are an expert educational content creator and curriculum specialist with deep knowledge across all academic subjects. Your role is to create high-quality, pedagogically sound worksheets for students.

CRITICAL REQUIREMENTS:

1. ACCURACY IS PARAMOUNT:
   - Every question MUST have a factually correct answer
   - Double-check all facts, dates, formulas, and scientific information
   - For math problems: solve each problem yourself and verify the answer is correct
   - For science: ensure all scientific facts are accurate and up-to-date
   - For history: verify dates, names, and events
   - For language: ensure grammar and spelling are perfect

2. ANSWER VERIFICATION PROCESS:
   - After creating each question, mentally solve/answer it
   - Verify the correct_answer field matches your solution
   - For multiple choice: ensure exactly ONE option is correct
   - For true/false: verify the statement's truthfulness
   - For fill-in-blank: ensure the answer logically completes the sentence
   - For math: show your work mentally and confirm the numerical answer

3. QUALITY STANDARDS:
   - Questions should be clear, unambiguous, and age-appropriate
   - Avoid trick questions unless specifically requested
   - Explanations should help students understand WHY the answer is correct
   - Distractors (wrong options) should be plausible but clearly incorrect

4. EDUCATIONAL VALUE:
   - Align with curriculum standards for the specified grade level
   - Progress from easier to harder questions when appropriate
   - Include a mix of recall, comprehension, and application questions
   - Make content engaging and relevant to students

5. OUTPUT FORMAT:
   - Always output valid JSON only, no markdown or extra text
   - Follow the exact structure requested
   - Ensure all required fields are present

6. MATHEMATICAL NOTATION (LaTeX):
   - For math questions, use LaTeX notation within the question text
   - Wrap inline math with $...$ (e.g., $x^2 + y^2 = z^2$)
   - Wrap display math with $$...$$ (e.g., $$\frac{a}{b} = c$$)
   - For geometry/diagrams, include a "latex_diagram" field with TikZ code
   - TikZ example: "\\begin{tikzpicture}\\draw (0,0) -- (2,0) -- (1,1.7) -- cycle;\\end{tikzpicture}"
   - Use LaTeX for: fractions, exponents, roots, integrals, summations, matrices
   - Keep diagrams simple and educational"""

DEFAULT_QUESTION_TYPE = "multiple_choice"

_LANGUAGE_INSTRUCTIONS: dict[str, str] = {
    "en": "English - Generate all content in English",
    "tr": "Turkish (Türkçe) - Generate ALL content including questions, options, answers, and explanations in Turkish",
    "es": "Spanish (Español) - Generate ALL content in Spanish",
    "fr": "French (Français) - Generate ALL content in French",
    "de": "German (Deutsch) - Generate ALL content in German",
}

_RULE = "━" * 26

_OUTPUT_REQUIREMENTS = f"""🎯 OUTPUT REQUIREMENTS:
{_RULE}
Generate a JSON object with this EXACT structure:

{{
  "title": "Creative and descriptive worksheet title",
  "questions": [
    {{
      "id": "q_1",
      "type": "multiple_choice",
      "question": "Question text with $LaTeX$ math notation if needed",
      "options": ["Option A with $math$", "Option B", "Option C", "Option D"],
      "correct_answer": "The correct option (must match exactly one of the options)",
      "explanation": "Educational explanation with $math$ if needed",
      "points": 10
    }}
  ]
}}"""

_MATH_NOTATION = r"""📐 MATHEMATICAL NOTATION:
{rule}
- Use LaTeX for ALL mathematical expressions
- Inline math: $x^2$, $\frac{{1}}{{2}}$, $\sqrt{{16}}$
- Display math: $$\sum_{{i=1}}^{{n}} i = \frac{{n(n+1)}}{{2}}$$
- Fractions: $\frac{{a}}{{b}}$
- Exponents: $x^2$, $2^{{10}}$
- Roots: $\sqrt{{x}}$, $\sqrt[3]{{8}}$
- Greek letters: $\pi$, $\theta$, $\alpha$
- Geometry: $\angle ABC$, $\triangle ABC$, $\perp$, $\parallel$
- For early grades: Keep it simple - use LaTeX only for basic operations""".format(rule=_RULE)

_QUESTION_TYPE_FORMATS = f"""📋 QUESTION TYPE FORMATS:
{_RULE}
• multiple_choice: 4 options array, correct_answer = exact option text
• true_false: options = ["True", "False"], correct_answer = "True" or "False"
• fill_blank: use __________ for blank, correct_answer = the word/phrase
• short_answer: no options, correct_answer = sample correct response
• essay: no options, points = higher value, correct_answer = grading criteria
• matching: options = ["Term A → Definition 1", ...], correct_answer = ["A-1", ...]"""

_VERIFICATION_CHECKLIST = f"""⚠️ VERIFICATION CHECKLIST (Do this for EACH question):
{"━" * 52}
□ Is the question factually accurate?
□ Is the correct_answer actually correct? (Solve/verify it yourself)
□ For math: Did you calculate the answer and verify it's right?
□ For science: Is the scientific information accurate?
□ For multiple choice: Is there exactly ONE correct answer?
□ Does the explanation help students understand the concept?

Output ONLY the JSON object. No markdown, no code blocks, no extra text."""

VERIFICATION_PROMPT = """You are an expert fact-checker and educator. Review these questions and their answers for accuracy.

SUBJECT: {subject}
TOPIC: {topic}

QUESTIONS TO VERIFY:
{questions_json}

TASK:
1. Check each question's correct_answer for factual accuracy
2. For math problems: solve them yourself and verify the answer
3. For science/history: verify facts are correct
4. If an answer is WRONG, fix it with the correct answer
5. Return the corrected questions array in the same JSON format

IMPORTANT:
- Only output the JSON array of questions
- Keep the exact same structure
- Only change correct_answer and explanation if there's an error
- If all answers are correct, return them unchanged

Output ONLY valid JSON array, no markdown or extra text."""


def language_instruction(code: str) -> str:
    """Directive telling the model which language to write in."""
    if code in _LANGUAGE_INSTRUCTIONS:
        return _LANGUAGE_INSTRUCTIONS[code]
    return f"{code} - Generate ALL content in this language"


def build_worksheet_prompt(request: WorksheetGeneratorInput) -> str:
    question_types = ", ".join(request.question_types) or DEFAULT_QUESTION_TYPE

    additional = ""
    if request.additional_instructions:
        additional = f"\n\n📝 ADDITIONAL TEACHER INSTRUCTIONS:\n{request.additional_instructions}"

    specifications = f"""Generate an educational worksheet with the following specifications:

📚 WORKSHEET SPECIFICATIONS:
{_RULE}
• Topic: {request.topic}
• Subject: {request.subject}
• Grade Level: {request.grade_level}
• Difficulty: {request.difficulty}
• Number of Questions: {request.question_count}
• Question Types: {question_types}
• Language: {language_instruction(request.language)}{additional}"""

    return "\n\n".join([
        specifications,
        _OUTPUT_REQUIREMENTS,
        _MATH_NOTATION,
        _QUESTION_TYPE_FORMATS,
        _VERIFICATION_CHECKLIST,
    ])


def build_verification_prompt(questions_json: str, subject: str, topic: str) -> str:
    return VERIFICATION_PROMPT.format(
        subject=subject, topic=topic, questions_json=questions_json,
    )
