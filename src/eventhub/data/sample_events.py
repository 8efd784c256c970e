# Seed catalogue used by `cli.py events seed`.
from __future__ import annotations

from typing import Dict, List


def _event(title: str, image: str, venue: str, location: str, date: str, time: str,
           mode: str, tags: List[str], organizer: str) -> Dict:
    return {
        "title": title,
        "description": f"{title} brings developers together for talks, workshops and networking.",
        "overview": f"Two packed days of sessions from the teams and community behind {title.rsplit(' ', 1)[0]}.",
        "image": image,
        "venue": venue,
        "location": location,
        "date": date,
        "time": time,
        "mode": mode,
        "audience": "Developers, engineering managers and students",
        "agenda": [
            "Registration and breakfast",
            "Opening keynote",
            "Breakout sessions",
            "Closing panel",
        ],
        "organizer": organizer,
        "tags": tags,
    }


SAMPLE_EVENTS: List[Dict] = [
    _event("React Conf 2024", "/images/event1.png", "Henderson Convention Center",
           "Las Vegas, NV", "October 15-16, 2024", "9:00 AM - 6:00 PM", "hybrid",
           ["react", "javascript", "frontend"], "Meta Open Source"),
    _event("Google I/O 2024", "/images/event2.png", "Shoreline Amphitheatre",
           "Mountain View, CA", "May 14-16, 2024", "10:00 AM - 5:00 PM", "hybrid",
           ["google", "android", "ai"], "Google"),
    _event("AWS re:Invent 2024", "/images/event3.png", "The Venetian",
           "Las Vegas, NV", "December 2-6, 2024", "8:00 AM - 7:00 PM", "offline",
           ["aws", "cloud", "devops"], "Amazon Web Services"),
    _event("Microsoft Build 2024", "/images/event4.png", "Seattle Convention Center",
           "Seattle, WA", "May 21-23, 2024", "9:00 AM - 6:00 PM", "hybrid",
           ["microsoft", "azure", "dotnet"], "Microsoft"),
    _event("PyCon US 2024", "/images/event5.png", "David L. Lawrence Convention Center",
           "Pittsburgh, PA", "May 15-23, 2024", "8:30 AM - 6:00 PM", "offline",
           ["python", "community", "open-source"], "Python Software Foundation"),
    _event("JSConf EU 2024", "/images/event6.png", "Arena Berlin",
           "Berlin, Germany", "June 10-11, 2024", "9:00 AM - 6:00 PM", "offline",
           ["javascript", "web", "community"], "JSConf EU"),
]
