"""UI constants shared by the Qt window and the browser page."""

WINDOW_TITLE: str = "Kvizoteka"
WINDOW_MIN_WIDTH: int = 720
WINDOW_MIN_HEIGHT: int = 640
QUESTION_FONT_SIZE: int = 14

START_TITLE: str = "Kvizoteka"
START_DESCRIPTION: str = "Test your knowledge! Answer with a click or the number keys, continue with Enter."
START_BUTTON_TEXT: str = "Start Quiz"
START_COUNT_TEMPLATE: str = "{count} questions await you"
ABOUT_BUTTON_TEXT: str = "About Kvizoteka"
OPEN_QUESTIONS_BUTTON_TEXT: str = "Open questions"
OPEN_DIALOG_TITLE: str = "Select question file"
OPEN_FILE_FILTER: str = "Question files (*.json *.txt);;All files (*.*)"

NEXT_BUTTON_TEXT: str = "Next question →"
FINISH_BUTTON_TEXT: str = "Finish quiz →"
PROGRESS_TEMPLATE: str = "Question {position} / {total}"

RESTART_BUTTON_TEXT: str = "Play again"
SCORE_TEMPLATE: str = "{correct} / {total}"
CORRECT_COUNT_TEMPLATE: str = "Correct: {count}"
WRONG_COUNT_TEMPLATE: str = "Wrong: {count}"
PERCENTAGE_TEMPLATE: str = "{percentage}%"

LOAD_ERROR_MESSAGE: str = "Error loading questions. Please reload or open another question file."
NO_QUESTIONS_MESSAGE: str = "No questions loaded yet."
LOADED_MESSAGE_TEMPLATE: str = "Loaded {count} questions from {name}."

# Shown in place of a question image when the question has none.
PLACEHOLDER_IMAGE: str = (
    "data:image/svg+xml;utf8,"
    "<svg width='400' height='300' xmlns='http://www.w3.org/2000/svg'>"
    "<rect width='400' height='300' fill='%231a1a2e'/>"
    "<text x='200' y='150' font-family='Arial' font-size='48' fill='%23667eea' "
    "text-anchor='middle' dy='.3em'>?</text></svg>"
)
