"""
Questionnaire - the scripted interview that feeds JD generation.

Questions are asked in a fixed order; a question with a condition is only
asked when the condition holds for the answers collected so far (contract
duration is only asked for Contract hires). The visible list is
re-evaluated after every answer.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

TEXT = "text"
SELECT = "select"
TEXTAREA = "textarea"
MULTI_SELECT = "multi-select"

HIRE_TYPES = ["Full-time", "Part-time", "Contract", "Freelance"]

# Answers collected as lists of items rather than free text
LIST_KEYS = {"skills", "benefits"}


@dataclass
class Question:
    key: str
    q: str
    type: str = TEXT
    placeholder: str = ""
    suggestions: List[str] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    condition: Optional[Callable[[Dict[str, Any]], bool]] = None

    @property
    def is_list(self) -> bool:
        return self.key in LIST_KEYS or self.type == MULTI_SELECT

    def applies_to(self, answers: Dict[str, Any]) -> bool:
        return self.condition is None or bool(self.condition(answers))

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "key": self.key,
            "q": self.q,
            "type": self.type,
            "placeholder": self.placeholder,
            "suggestions": list(self.suggestions),
            "is_list": self.is_list,
        }
        if self.options:
            data["options"] = list(self.options)
        return data


QUESTIONS: List[Question] = [
    Question(
        key="role",
        q="What is the job role?",
        placeholder="e.g., Senior Software Engineer, Marketing Manager, Sales Director",
        suggestions=["Software Engineer", "Product Manager", "Marketing Specialist",
                     "Sales Representative", "Data Analyst", "UX Designer",
                     "DevOps Engineer", "Business Analyst"],
    ),
    Question(
        key="location",
        q="Where is the job located?",
        placeholder="e.g., San Francisco, CA or Remote or Hybrid",
        suggestions=["Remote", "New York, NY", "San Francisco, CA", "Austin, TX",
                     "Seattle, WA", "Boston, MA", "Chicago, IL", "Hybrid"],
    ),
    Question(
        key="timezone",
        q="What time zone should they work in?",
        placeholder="e.g., PST, EST, GMT, or Flexible",
        suggestions=["PST (Pacific)", "EST (Eastern)", "CST (Central)", "MST (Mountain)",
                     "GMT (UTC)", "Flexible", "Any timezone", "Business hours only"],
    ),
    Question(
        key="hireType",
        q="What type of employment?",
        type=SELECT,
        options=HIRE_TYPES,
    ),
    Question(
        key="duration",
        q="If contract, what's the duration?",
        placeholder="e.g., 6 months, 1 year, 3-6 months",
        suggestions=["3 months", "6 months", "1 year", "2 years", "3-6 months",
                     "6-12 months", "Project-based", "Until filled permanently"],
        condition=lambda answers: answers.get("hireType") == "Contract",
    ),
    Question(
        key="domain",
        q="What industry or domain?",
        placeholder="e.g., SaaS, Healthcare, Finance, E-commerce",
        suggestions=["SaaS", "Healthcare", "Finance", "E-commerce", "Education",
                     "Manufacturing", "Retail", "Technology", "Consulting", "Non-profit"],
    ),
    Question(
        key="skills",
        q="What are the key skills required?",
        type=TEXTAREA,
        placeholder="Type a skill and press Enter to add it...",
        suggestions=["JavaScript", "Python", "Project Management", "Sales", "Marketing",
                     "Data Analysis", "Leadership", "Communication"],
    ),
    Question(
        key="goals",
        q="What are the 1-year success goals?",
        type=TEXTAREA,
        placeholder="e.g., Achieve 150% of sales quota, Launch 3 new products, Reduce customer churn by 20%",
        suggestions=["Increase revenue by 30%", "Launch new product line", "Build team of 5 people",
                     "Improve customer satisfaction", "Reduce costs by 15%", "Expand to new markets"],
    ),
    Question(
        key="kpi",
        q="What are the key performance indicators?",
        placeholder="e.g., Monthly recurring revenue, Customer acquisition cost, Response time",
        suggestions=["Monthly Recurring Revenue (MRR)", "Customer Acquisition Cost (CAC)",
                     "Customer Lifetime Value (CLV)", "Response Time", "Conversion Rate",
                     "User Engagement", "Sales Quota", "Customer Satisfaction Score"],
    ),
    Question(
        key="superstar",
        q="What would make this person a superstar?",
        type=TEXTAREA,
        placeholder="e.g., Exceed all KPIs by 200%, Become a thought leader in the industry, Mentor junior team members",
        suggestions=["Exceed KPIs by 200%", "Become industry thought leader", "Mentor junior team members",
                     "Innovate new processes", "Build strong client relationships",
                     "Drive team collaboration"],
    ),
    Question(
        key="ninety",
        q="What should they achieve in the first 90 days?",
        type=TEXTAREA,
        placeholder="e.g., Complete onboarding, Close first deal, Build pipeline of $500K",
        suggestions=["Complete full onboarding", "Close first major deal", "Build $500K pipeline",
                     "Meet all team members", "Understand company processes", "Deliver first project",
                     "Establish key relationships"],
    ),
    Question(
        key="benefits",
        q="What benefits and perks are offered?",
        type=MULTI_SELECT,
        placeholder="Click suggestions below to add benefits, or type your own",
        suggestions=["Health insurance", "401k matching", "Flexible PTO", "Stock options",
                     "Remote work", "Learning budget", "Gym membership", "Free meals",
                     "Transportation allowance", "Dental insurance", "Vision insurance",
                     "Life insurance", "Parental leave", "Professional development",
                     "Work from home stipend"],
    ),
    Question(
        key="applicationProcess",
        q="What's the application process?",
        placeholder="e.g., Send resume to jobs@company.com, Include cover letter, 3 rounds of interviews",
        suggestions=["Email resume to jobs@company.com", "Include cover letter", "3 rounds of interviews",
                     "Technical assessment", "Reference check", "Background verification",
                     "Portfolio review", "Case study presentation"],
    ),
]

QUESTIONS_BY_KEY: Dict[str, Question] = {question.key: question for question in QUESTIONS}


def get_question(key: str) -> Question:
    try:
        return QUESTIONS_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown question: {key}") from None


def visible_questions(answers: Dict[str, Any]) -> List[Question]:
    return [question for question in QUESTIONS if question.applies_to(answers or {})]


def _as_items(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


def validate_answer(question: Question, value: Any) -> Tuple[Any, Optional[str]]:
    """
    Check an answer against its question.

    Returns (cleaned_value, error). List questions accept a list or a
    comma-separated string and return a list of trimmed items.
    """
    if question.is_list:
        items = _as_items(value)
        if not items:
            if question.key == "skills":
                return items, "Please add at least one skill."
            return items, "Please select at least one option."
        return items, None

    text = "" if value is None else str(value).strip()
    if not text:
        return text, "Please provide an answer."
    if question.type == SELECT and text not in question.options:
        return text, f"Please choose one of: {', '.join(question.options)}."
    return text, None


class AnswerRejected(ValueError):
    pass


class QuestionnaireSession:
    """
    Step-by-step walk through the questionnaire.

    Usage:
        session = QuestionnaireSession()
        while not session.is_complete:
            question = session.current()
            session.answer(input(question.q))
    """

    def __init__(self, answers: Optional[Dict[str, Any]] = None, step: int = 0):
        self.answers: Dict[str, Any] = dict(answers or {})
        self.step = max(0, step)

    @property
    def questions(self) -> List[Question]:
        return visible_questions(self.answers)

    @property
    def is_complete(self) -> bool:
        return self.step >= len(self.questions)

    @property
    def progress(self) -> str:
        total = len(self.questions)
        return f"Question {min(self.step + 1, total)} of {total}"

    def current(self) -> Optional[Question]:
        questions = self.questions
        if self.step < len(questions):
            return questions[self.step]
        return None

    def answer(self, value: Any) -> Optional[Question]:
        """Validate and store an answer for the current question, then advance."""
        question = self.current()
        if question is None:
            raise AnswerRejected("Questionnaire is already complete.")
        cleaned, error = validate_answer(question, value)
        if error:
            raise AnswerRejected(error)
        self.answers[question.key] = cleaned
        self._drop_hidden_answers()
        self.step += 1
        return self.current()

    def back(self) -> Optional[Question]:
        if self.step > 0:
            self.step -= 1
        return self.current()

    def _drop_hidden_answers(self) -> None:
        # e.g. a contract duration left over after switching to Full-time
        for question in QUESTIONS:
            if question.key in self.answers and not question.applies_to(self.answers):
                del self.answers[question.key]

    def to_dict(self) -> Dict[str, Any]:
        return {"step": self.step, "answers": dict(self.answers)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionnaireSession":
        return cls(answers=data.get("answers") or {}, step=int(data.get("step") or 0))
