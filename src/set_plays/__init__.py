"""set-plays：彙整 DJ set 清單在 Mixcloud / SoundCloud / YouTube 上的播放次數。"""

__version__ = "0.1.0"
