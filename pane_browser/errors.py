"""브라우저 예외 정의"""


class BrowserError(Exception):
    """pane_browser 예외의 기본 클래스"""


class ResolutionFailure(BrowserError):
    """ContentResolver가 제목에 대한 콘텐츠를 만들지 못한 경우

    네트워크 오류, 존재하지 않는 문서, 잘못된 응답 모두 여기에 해당
    """

    def __init__(self, title: str, reason: str):
        super().__init__(f"{title}: {reason}")
        self.title = title
        self.reason = reason
