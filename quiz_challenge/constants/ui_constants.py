"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Challenge"
HOME_HEADLINE: str = "Quiz Challenge"
HOME_SUBTITLE: str = "Choose a quiz category to test your knowledge!"
LOADING_MESSAGE: str = "Loading…"
SUBMITTING_MESSAGE: str = "Submitting your answers…"

HOME_START_BUTTON: str = "Start Quiz"
HOME_STATS_BUTTON: str = "Stats"
HOME_REFRESH_BUTTON: str = "Refresh"
HOME_ABOUT_BUTTON: str = "About"
QUIZ_SUBMIT_BUTTON: str = "Submit Answer"
QUIZ_QUIT_BUTTON: str = "Quit Quiz"
RESULT_RETRY_BUTTON: str = "Try Again"
RESULT_HOME_BUTTON: str = "Home"
STATS_BACK_BUTTON: str = "Back"

QUESTION_PROGRESS_TEMPLATE: str = "Question {number}/{total}"
TIME_LEFT_TEMPLATE: str = "{seconds}s"
RUNNING_SCORE_TEMPLATE: str = "Answered: {answered}/{total}"
TIMEOUT_FEEDBACK: str = "⏱ Time is up!"
ANSWER_SENT_FEEDBACK: str = "Answer recorded."

RESULT_HEADLINE: str = "Quiz Complete!"
RESULT_UNCONFIRMED_MESSAGE: str = (
    "Your answers could not be submitted, so this attempt was not scored or recorded."
)
STATS_HEADLINE: str = "Quiz Statistics"
LEADERBOARD_TITLE: str = "Leaderboard (Top 10)"
LEADERBOARD_EMPTY: str = "No attempts recorded yet."
NO_QUIZZES_MESSAGE: str = "No quizzes available. Is the quiz server running?"
