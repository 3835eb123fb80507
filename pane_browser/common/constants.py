# 창 크기
WIDTH, HEIGHT = 1280, 800

# 페인 콘텐츠 여백
HSTEP, VSTEP = 13, 18
SCROLL_STEP = 100

# 페인 폭 (픽셀)
MIN_PANE_WIDTH = 200
DEFAULT_PANE_WIDTH = 720
RESIZER_WIDTH = 4

# 첫 화면에 띄울 문서
LANDING_PAGE = "Main Page"

WIKI_HOST = "en.wikipedia.org"
WIKI_API_URL = f"https://{WIKI_HOST}/w/api.php"
WIKI_ARTICLE_URL = f"https://{WIKI_HOST}/wiki/"
