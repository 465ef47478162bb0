"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "IntervalQt Trainer"

MODE_BUTTON_START: str = "Start Quiz"
MODE_BUTTON_RESTART: str = "New Round"
MODE_BUTTON_STOP: str = "End Round"

ANSWER_PLACEHOLDER: str = "Type a note (e.g. C, F#, Bb) and press Enter"
SUBMIT_BUTTON: str = "Submit"
NEXT_QUESTION_BUTTON: str = "Next Question"
SHOW_REVIEW_BUTTON: str = "Show Review"
ELAPSED_TEMPLATE: str = "Time: {elapsed}"
SCORE_TEMPLATE: str = "Score: {score} / {total}"

WELCOME_MESSAGE: str = (
    "### Interval trainer\n\n"
    "Press **Start Quiz** to get a round of interval questions. "
    "Answer with a note name; flats such as *Bb* are accepted."
)
REVIEW_EMPTY_STATE: str = "Finish a round to see your review."
CONFIRM_END_ROUND_MESSAGE: str = "End the current round? Unanswered questions will be scored as wrong."
