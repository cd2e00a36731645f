"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ExamNotFoundError(BaseAppError):
    """시험을 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, exam_id: int):
        self.exam_id = exam_id
        super().__init__(f"시험을 찾을 수 없습니다: {exam_id}", status_code=404)


class UserNotFoundError(BaseAppError):
    """사용자를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"사용자를 찾을 수 없습니다: {user_id}", status_code=404)


class QuestionNotFoundError(BaseAppError):
    """문제를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"문제를 찾을 수 없습니다: {question_id}", status_code=404)


class AnswerNotFoundError(BaseAppError):
    """답안 기록을 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, answer_id: int):
        self.answer_id = answer_id
        super().__init__(f"답안 기록을 찾을 수 없습니다: {answer_id}", status_code=404)


class DuplicateAnswerError(BaseAppError):
    """같은 시험/사용자 쌍의 답안 기록이 이미 있을 때 발생하는 예외 (409)"""

    def __init__(self, exam_id: int, user_id: int):
        super().__init__(
            f"이미 답안 기록이 존재합니다: exam_id={exam_id}, user_id={user_id}",
            status_code=409,
        )


class AlreadySubmittedError(BaseAppError):
    """제출 완료된 답안을 변경하려 할 때 발생하는 예외 (409)"""

    def __init__(self, message: str = "이미 제출된 시험입니다"):
        super().__init__(message, status_code=409)


class ExamClosedError(BaseAppError):
    """응시 가능 시간이 아니거나 비활성 시험일 때 발생하는 예외 (403)"""

    def __init__(self, exam_id: int):
        self.exam_id = exam_id
        super().__init__(f"현재 응시할 수 없는 시험입니다: {exam_id}", status_code=403)


class InvalidExamDateRangeError(BaseAppError):
    """종료 시각이 시작 시각보다 늦지 않을 때 발생하는 예외 (400)"""

    def __init__(self, message: str = "종료 시각은 시작 시각 이후여야 합니다"):
        super().__init__(message, status_code=400)


class InvalidChoiceCountError(BaseAppError):
    """보기 개수가 4개가 아닐 때 발생하는 예외 (400)"""

    def __init__(self, count: int):
        super().__init__(f"보기는 정확히 4개여야 합니다: 현재 {count}개", status_code=400)


class UnknownChoiceSymbolError(BaseAppError):
    """정답 기호가 A, B, C, D 중 하나가 아닐 때 발생하는 예외 (400)"""

    def __init__(self, symbol: str):
        super().__init__(f"정답은 A, B, C, D 중 하나여야 합니다: {symbol!r}", status_code=400)


class DuplicateEmailError(BaseAppError):
    """이미 등록된 이메일일 때 발생하는 예외 (409)"""

    def __init__(self, email: str):
        super().__init__(f"이미 등록된 이메일입니다: {email}", status_code=409)


class UserHasAnswersError(BaseAppError):
    """답안 기록이 남아 있는 사용자를 삭제하려 할 때 발생하는 예외 (409)"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"답안 기록이 있는 사용자는 삭제할 수 없습니다: {user_id}", status_code=409)
