"""Built-in example postings for trying the analyzer without a real job."""
from __future__ import annotations

EXAMPLE_POSTINGS: dict[str, str] = {
    "Excellent Example": """\
Senior Backend Engineer (Go)
CloudSphere Inc. - Remote (Austin, TX)
Salary: $180,000 - $200,000 per year
Posted: 1 day ago

CloudSphere is seeking a highly skilled Senior Backend Engineer with expertise in Go to join our \
distributed team. You will be responsible for designing, developing, and maintaining our core cloud \
infrastructure. We offer a comprehensive benefits package, unlimited PTO, and a strong culture of \
innovation and collaboration. This is a fully remote position open to candidates across the United States.""",
    "Average Example": """\
Marketing Associate
MarketPro LLC - Chicago, IL (Hybrid)
Salary: $65,000 - $85,000
Posted: 2 weeks ago

MarketPro LLC is looking for a creative Marketing Associate to support our campaign development and \
execution. The ideal candidate will have 2-3 years of marketing experience. This is a hybrid role, with \
2 days per week in our Chicago office. Responsibilities include social media management, content \
creation, and event coordination.""",
    "Poor Example": """\
Junior Graphic Designer
Creative Solutions - New York, NY (Onsite)
Salary: Competitive

We are hiring a Junior Graphic Designer to join our team in NYC. Must be proficient in Adobe Creative \
Suite. This is a full-time, onsite position. The successful candidate will work on a variety of design \
projects.
Posted 2 months ago""",
}


def get_example(name: str) -> str:
    """Look up an example by name; accepts short forms like "poor"."""
    if name in EXAMPLE_POSTINGS:
        return EXAMPLE_POSTINGS[name]
    key = name.strip().lower()
    for label, content in EXAMPLE_POSTINGS.items():
        if label.lower().split()[0] == key:
            return content
    raise KeyError(f"Unknown example {name!r}; choose from {', '.join(EXAMPLE_POSTINGS)}")
