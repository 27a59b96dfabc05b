from medquiz.llm.parser import IMAGE_MARKER


def build_explanation_prompt(difficulty: str, question: str, options: list[str], correct_index: int) -> str:
    correct = options[correct_index]
    numbered = ", ".join(f"{i + 1}. {opt}" for i, opt in enumerate(options))
    wrong_sections = "\n\n".join(
        f"{opt}:\n• Point 1 why it's wrong\n• Point 2 why it's wrong"
        for i, opt in enumerate(options)
        if i != correct_index
    )

    return f"""For this {difficulty.lower()} level medical question and its options:
Question: "{question}"
Options: {numbered}
Correct Answer: {correct}

Please provide a point-wise explanation in this exact format:
CORRECT ANSWER ({correct}):
• Point 1 about why it's correct
• Point 2 about why it's correct

WHY OTHER OPTIONS ARE INCORRECT:
{wrong_sections}

Also provide a brief description of a medical diagram or image that would help explain this concept.
{IMAGE_MARKER}
"""


def build_learning_objectives_prompt(difficulty: str, question: str, options: list[str], correct_index: int) -> str:
    return f"""For this {difficulty.lower()} level medical question:
Question: "{question}"
Correct Answer: {options[correct_index]}

Create concise learning objectives that include:
1. Key points to remember (2-3 bullet points)
2. Any relevant formulas or equations
3. A small table if applicable
4. A brief flowchart or mindmap description if relevant
5. One flashcard-style quick fact

Format the response in HTML with appropriate tags (<ul>, <table>, etc.).
Also suggest a medical diagram or illustration that would help reinforce these concepts.
{IMAGE_MARKER}
"""


def build_doubt_prompt(difficulty: str, doubt: str, question: str) -> str:
    return f"""Regarding this {difficulty.lower()} level medical question:
"{question}"

User's doubt: "{doubt}"

Please provide a clear, detailed explanation addressing this specific doubt in the context of the question.
Focus on medical accuracy and explain in a way that's helpful for medical students.

Also suggest if a medical diagram or image would be helpful, and if so, describe what it should show.
{IMAGE_MARKER}
"""


def build_question_prompt(subject: str, difficulty: str, previous_questions: list[str] | None = None) -> str:
    level = difficulty.lower() or "medium"

    prompt = f"""You are a question writer for medical students.

Subject: {subject}
Difficulty: {level}

Write ONE multiple-choice question about {subject} at {level} difficulty.

Rules:
1. The question must have exactly 4 answer options. Exactly one is correct.
2. Make the wrong options plausible but clearly wrong to someone who knows the topic.
3. "options" must contain the actual answer TEXT, NOT letters like A, B, C, D.
4. "correct" must be the EXACT text of one of the options.
5. Output ONLY a valid JSON object, no extra text before or after.

Example:
{{"question": "Which nerve innervates the diaphragm?", "options": ["Vagus nerve", "Phrenic nerve", "Intercostal nerve", "Accessory nerve"], "correct": "Phrenic nerve"}}

Output ONLY the JSON object:"""

    if previous_questions:
        numbered = "\n".join(f"{i + 1}. {q}" for i, q in enumerate(previous_questions))
        return prompt + f"""

IMPORTANT — DO NOT REPEAT THESE QUESTIONS.
The student has already answered these. Write a completely NEW and DIFFERENT question:

{numbered}

Output ONLY the JSON object:"""

    return prompt
