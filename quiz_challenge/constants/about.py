"""Static metadata describing Quiz Challenge."""

APP_NAME = "Quiz Challenge"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Challenge is a timed multiple-choice quiz game built with Qt and FastAPI. "
    "Pick a quiz, answer each question before the clock runs out, and compare "
    "your result on the leaderboard."
)

RULES_TEXT = (
    "Rules:\n"
    "• 15 seconds per question\n"
    "• No going back once answered\n"
    "• 1 point per correct answer\n"
    "• Track your progress on the leaderboard"
)
