from ..rendering import DrawLine, DrawOutline, DrawRect, DrawText, Rect, get_font

PLACEHOLDER = "Enter a Wikipedia page title"


class Chrome:
    """상단 검색창 + 상태 줄

    검색창에 제목을 입력하고 Enter나 Search 버튼을 누르면 session.search()
    상태 줄에는 조회 실패 알림이나 로딩 표시가 나옴
    """

    def __init__(self, browser):
        self.browser = browser
        self.font = get_font(16, "normal", "roman")
        self.font_height = self.font.metrics("linespace")
        self.padding = 8

        self.searchbar_top = 0
        self.searchbar_bottom = self.font_height + 4 * self.padding
        self.status_top = self.searchbar_bottom
        self.status_bottom = self.status_top + self.font_height + self.padding
        self.bottom = self.status_bottom

        self.focus = None
        self.search_text = ""

    @property
    def theme(self):
        return self.browser.theme

    def button_rect(self):
        label_width = self.font.measure("Search") + 4 * self.padding
        right = self.browser.width - 2 * self.padding
        return Rect(
            right - label_width,
            self.searchbar_top + self.padding,
            right,
            self.searchbar_bottom - self.padding,
        )

    def input_rect(self):
        return Rect(
            2 * self.padding,
            self.searchbar_top + self.padding,
            self.button_rect().left,
            self.searchbar_bottom - self.padding,
        )

    def paint(self):
        cmds = []
        width = self.browser.width
        theme = self.theme

        cmds.append(DrawRect(0, 0, width, self.bottom, theme.chrome_background))

        # 검색 입력창
        input_rect = self.input_rect()
        cmds.append(DrawRect(input_rect.left, input_rect.top, input_rect.right, input_rect.bottom, "white"))
        cmds.append(DrawOutline(input_rect, theme.button_color if self.focus == "search" else theme.input_border, 1))
        text_y = input_rect.top + (input_rect.height - self.font_height) / 2
        if self.search_text or self.focus == "search":
            cmds.append(DrawText(input_rect.left + self.padding, text_y, self.search_text, self.font, theme.text_color))
        else:
            cmds.append(DrawText(input_rect.left + self.padding, text_y, PLACEHOLDER, self.font, theme.placeholder_color))

        if self.focus == "search":
            x = input_rect.left + self.padding + self.font.measure(self.search_text)
            cmds.append(DrawLine(x, input_rect.top + 4, x, input_rect.bottom - 4, theme.text_color, 1))

        # Search 버튼
        button = self.button_rect()
        cmds.append(DrawRect(button.left, button.top, button.right, button.bottom, theme.button_color))
        cmds.append(DrawText(button.left + 2 * self.padding, text_y, "Search", self.font, theme.button_text))

        # 상태 줄
        notification = self.browser.session.notification
        if notification:
            cmds.append(DrawText(2 * self.padding, self.status_top, notification, self.font, theme.error_color))
        elif self.browser.session.is_loading:
            cmds.append(DrawText(2 * self.padding, self.status_top, "Loading...", self.font, theme.placeholder_color))

        cmds.append(DrawLine(0, self.bottom, width, self.bottom, theme.pane_border, 1))
        return cmds

    def click(self, e):
        if self.button_rect().containsPoint(e.x, e.y):
            self.submit()
        elif self.input_rect().containsPoint(e.x, e.y):
            self.focus = "search"
        else:
            self.focus = None
            if e.y >= self.status_top:
                self.browser.session.dismiss_notification()

    def keypress(self, char):
        if self.focus == "search":
            self.search_text += char
            return True
        return False

    def backspace(self):
        if self.focus == "search" and len(self.search_text) > 0:
            self.search_text = self.search_text[:-1]
            return True
        return False

    def enter(self):
        if self.focus == "search":
            self.submit()
            return True
        return False

    def submit(self):
        # 빈 검색어는 제출하지 않고 입력 내용도 그대로 둠
        if self.search_text.strip():
            self.browser.session.search(self.search_text)
            self.search_text = ""

    def blur(self):
        self.focus = None
