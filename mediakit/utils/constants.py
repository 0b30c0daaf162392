"""
Constantes globales pour MediaKit.

Ce module contient toutes les constantes utilisees dans l'application:
- Extensions video et sous-titres supportees
- Patterns a ignorer lors du scan
- Vocabulaire des tags de release (qualite, source, codec, divers)

Les cles du vocabulaire sont en minuscules et sans separateur :
"WEB-DL" et "H.264" sont recherches sous la forme "webdl" et "h264".
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".avi",
    ".mkv",
    ".mp4",
    ".m4v",
    ".flv",
    ".mov",
    ".wmv",
    ".webm",
    ".mpg",
    ".mpeg",
})

# Extensions de sous-titres reconnues
SUBTITLE_EXTENSIONS = frozenset({
    ".srt",
})

# Patterns a ignorer (sample, trailers, extras)
IGNORED_PATTERNS = frozenset({
    "sample",
    "trailer",
    "preview",
    "extras",
    "featurette",
})

# Token -> valeur de Quality
QUALITY_TOKENS = {
    "2160p": "2160p",
    "4k": "2160p",
    "uhd": "2160p",
    "1080p": "1080p",
    "1080i": "1080p",
    "fhd": "1080p",
    "720p": "720p",
    "576p": "SD",
    "480p": "SD",
    "360p": "SD",
    "sd": "SD",
}

# Token -> valeur de Source
SOURCE_TOKENS = {
    "cam": "CAM",
    "camrip": "CAM",
    "hdcam": "CAM",
    "ts": "TS",
    "hdts": "TS",
    "telesync": "TS",
    "tc": "TS",
    "telecine": "TS",
    "dvd": "DVD",
    "dvdrip": "DVD",
    "dvdr": "DVD",
    "dvd5": "DVD",
    "dvd9": "DVD",
    "dvdscr": "DVD",
    "hdtv": "HDTV",
    "pdtv": "HDTV",
    "sdtv": "HDTV",
    "tvrip": "HDTV",
    "dsr": "HDTV",
    "web": "WEB-DL",
    "webdl": "WEB-DL",
    "webhd": "WEB-DL",
    "webrip": "WEBRip",
    "bluray": "BluRay",
    "bdrip": "BluRay",
    "brrip": "BluRay",
    "bd": "BluRay",
}

# Token -> valeur de Codec
CODEC_TOKENS = {
    "xvid": "XviD",
    "divx": "XviD",
    "x264": "H.264",
    "h264": "H.264",
    "avc": "H.264",
    "x265": "H.265",
    "h265": "H.265",
    "hevc": "H.265",
    "vp9": "VP9",
    "av1": "AV1",
}

# Tags divers reconnus (ils ouvrent le bloc de tags au meme titre que les autres)
# Les mots courants en anglais (real, complete...) sont exclus pour ne pas
# couper un titre d'episode
MISC_TOKENS = frozenset({
    "proper",
    "repack",
    "rerip",
    "extended",
    "uncut",
    "unrated",
    "remastered",
    "internal",
    "remux",
    "hdr",
    "hdr10",
    "10bit",
    "imax",
    "multi",
    "subbed",
    "dubbed",
    "vostfr",
    "truefrench",
})
