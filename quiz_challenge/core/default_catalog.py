"""Built-in quizzes served when no catalog directory is configured."""

from __future__ import annotations

from quiz_challenge.core.models import Quiz, QuizQuestion


def _question(question_id: int, text: str, options: list[str], correct: int) -> QuizQuestion:
    return QuizQuestion(
        id=question_id,
        question_text=text,
        options=tuple(options),
        correct_option_index=correct,
    )


GENERAL_QUIZ = Quiz(
    id="general",
    title="General Knowledge Quiz",
    questions=(
        _question(1, "What is the capital of France?", ["London", "Berlin", "Paris", "Madrid"], 2),
        _question(2, "Which planet is known as the Red Planet?", ["Venus", "Mars", "Jupiter", "Saturn"], 1),
        _question(3, "What is 2 + 2?", ["3", "4", "5", "6"], 1),
        _question(4, "Who painted the Mona Lisa?", ["Van Gogh", "Picasso", "Da Vinci", "Monet"], 2),
        _question(5, "What is the largest ocean on Earth?", ["Atlantic", "Indian", "Arctic", "Pacific"], 3),
        _question(6, "In which year did World War II end?", ["1943", "1944", "1945", "1946"], 2),
        _question(7, "What is the chemical symbol for gold?", ["Go", "Gd", "Au", "Ag"], 2),
        _question(8, "Which country is home to the kangaroo?", ["New Zealand", "Australia", "South Africa", "Brazil"], 1),
        _question(9, "How many continents are there?", ["5", "6", "7", "8"], 2),
        _question(10, "What is the smallest prime number?", ["0", "1", "2", "3"], 2),
    ),
)

SCIENCE_QUIZ = Quiz(
    id="science",
    title="Science Quiz",
    questions=(
        _question(1, "What is H2O commonly known as?", ["Oxygen", "Hydrogen", "Water", "Carbon"], 2),
        _question(2, "How many bones are in the human body?", ["186", "206", "226", "246"], 1),
        _question(
            3,
            "What is the speed of light?",
            ["300,000 km/s", "150,000 km/s", "450,000 km/s", "600,000 km/s"],
            0,
        ),
        _question(4, "What is the powerhouse of the cell?", ["Nucleus", "Ribosome", "Mitochondria", "Chloroplast"], 2),
        _question(
            5,
            "What gas do plants absorb from the atmosphere?",
            ["Oxygen", "Nitrogen", "Carbon Dioxide", "Hydrogen"],
            2,
        ),
    ),
)

DEFAULT_QUIZZES: tuple[Quiz, ...] = (GENERAL_QUIZ, SCIENCE_QUIZ)
