"""
範例每日內容

每一種內容類型各至少一筆，用於開發環境與展示。
"""

SAMPLE_CONTENT = [
    {
        "day": 1,
        "title": "Day 1",
        "type": "text",
        "content": {
            "text": "Welcome to the first day of the festival. Open a new star every day.",
        },
    },
    {
        "day": 2,
        "title": "Night sky",
        "type": "image",
        "content": {
            "imageUrl": "https://images.unsplash.com/photo-1462331940025-496dfbfc7564",
            "imageCaption": "A field of stars",
        },
    },
    {
        "day": 3,
        "title": "A short film",
        "type": "video",
        "content": {
            "videoUrl": "https://www.youtube.com/watch?v=aqz-KE-bpKQ",
        },
    },
    {
        "day": 4,
        "title": "Music for the evening",
        "type": "audio",
        "content": {
            "audioUrl": "https://upload.wikimedia.org/wikipedia/commons/c/c8/Example.ogg",
        },
    },
    {
        "day": 5,
        "title": "Words to remember",
        "type": "citation",
        "content": {
            "citationText": "The earth is but one country, and mankind its citizens.",
            "citationSource": "Bahá'u'lláh",
        },
    },
    {
        "day": 6,
        "title": "Read more",
        "type": "link",
        "content": {
            "linkUrl": "https://en.wikipedia.org/wiki/Ridv%C3%A1n",
            "linkDescription": "History of the festival",
        },
    },
]


def get_sample_days() -> list[int]:
    """取得範例資料包含的天數"""
    return [item["day"] for item in SAMPLE_CONTENT]
