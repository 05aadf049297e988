"""平台註冊表：匯入所有平台並組成 ALL_PROVIDERS。

鍵名需與 detect.ProviderLinks 的欄位名稱一致。
新增平台時，在此匯入並加入對應表即可。
"""

from .base import BaseProvider
from .mixcloud import MixcloudProvider
from .soundcloud import SoundCloudProvider
from .youtube import YouTubeProvider

ALL_PROVIDERS: dict[str, BaseProvider] = {
    "mixcloud": MixcloudProvider(),       # Mixcloud：公開 API
    "soundcloud": SoundCloudProvider(),   # SoundCloud：API 憑證 → HTML fallback
    "youtube": YouTubeProvider(),         # YouTube：Data API v3（需 API key）
}
