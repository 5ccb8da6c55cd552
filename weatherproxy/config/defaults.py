"""CWA dataset identifiers and the region alias table."""

from types import MappingProxyType

CWA_BASE_URL = "https://opendata.cwa.gov.tw/api"

# 36-hour general forecast, and the township weekly forecast
SHORT_TERM_DATASET = "F-C0032-001"
WEEKLY_DATASET = "F-D0047-089"
WEEKLY_ELEMENT_NAME = "溫度"

DEFAULT_LOCATION = "taipei"

# Short alias -> canonical county/city name. Keys are case sensitive.
REGION_ALIASES = MappingProxyType({
    "taipei": "臺北市",
    "newtaipei": "新北市",
    "keelung": "基隆市",
    "taoyuan": "桃園市",
    "hsinchu": "新竹縣",
    "hsinchuCity": "新竹市",
    "miaoli": "苗栗縣",
    "taichung": "臺中市",
    "nantou": "南投縣",
    "changhua": "彰化縣",
    "yunlin": "雲林縣",
    "chiayi": "嘉義縣",
    "chiayiCity": "嘉義市",
    "tainan": "臺南市",
    "kaohsiung": "高雄市",
    "pingtung": "屏東縣",
    "yilan": "宜蘭縣",
    "hualien": "花蓮縣",
    "taitung": "臺東縣",
    "kinmen": "金門縣",
    "penghu": "澎湖縣",
    "matsu": "連江縣",
})
