# services/defaults.py
# 默认站点设置与首页模块：服务端是唯一真源，客户端兜底也从这里取

SETTINGS_KEY = "site_settings"
HOMEPAGE_SECTIONS_KEY = "homepage_sections"
CASE_STUDY_PREFIX = "case_study:"
BLOG_POST_PREFIX = "blog_post:"

BLOG_CATEGORIES = [
    "Design & UX",
    "Personal Growth",
    "Technology",
    "Creative Projects",
    "Industry Insights",
    "Other",
]
BLOG_STATUSES = ("draft", "published")

DEFAULT_SITE_SETTINGS = {
    "siteName": "Enrico Portfolio",
    "heroTitle": "Crafting meaningful digital experiences",
    "heroSubtitle": (
        "I'm a product designer focused on creating user-centered solutions that solve "
        "real problems and delight users."
    ),
    "aboutTitle": "Let's work together",
    "aboutDescription": (
        "I'm passionate about solving complex problems through thoughtful design. With over "
        "5 years of experience in product design, I've helped companies of all sizes create "
        "digital experiences that users love."
    ),
    "aboutExpertise": [
        "Product Design",
        "UX Research",
        "Design Systems",
        "Prototyping",
        "User Testing",
        "Interface Design",
    ],
    "contactEmail": "hello@example.com",
    "contactPhone": "+1 (555) 123-4567",
    "socialLinkedIn": "https://linkedin.com/in/yourprofile",
    "socialTwitter": "https://twitter.com/yourhandle",
    "socialDribbble": "https://dribbble.com/yourprofile",
    "socialBehance": "https://behance.net/yourprofile",
}

DEFAULT_HOMEPAGE_SECTIONS = [
    {"id": "hero", "name": "Hero Section", "isVisible": True, "order": 1},
    {
        "id": "stats",
        "name": "Stats Section",
        "isVisible": True,
        "order": 2,
        "data": {
            "stats": [
                {"icon": "Users", "value": "50+", "label": "Happy Clients"},
                {"icon": "Zap", "value": "100+", "label": "Projects Completed"},
                {"icon": "Sparkles", "value": "5+", "label": "Years Experience"},
            ],
        },
    },
    {"id": "values", "name": "About Me / Values", "isVisible": True, "order": 3},
    {"id": "philosophy", "name": "Philosophy Section", "isVisible": True, "order": 4},
    {"id": "experience", "name": "Experience Timeline", "isVisible": True, "order": 5},
    {"id": "skills", "name": "Skills & Expertise", "isVisible": True, "order": 6},
    {"id": "projects", "name": "Featured Projects", "isVisible": True, "order": 7},
    {"id": "cta", "name": "CTA Section", "isVisible": True, "order": 8},
]
