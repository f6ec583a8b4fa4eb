# app/services/chatbot_service.py

GREETING = (
    "Hello! I'm your career guidance assistant. I can help with careers, "
    "education and choosing the right path for your future."
)

# (keywords, reply) checked in order, first hit wins
RULES = [
    (("career", "job"),
     "I can help you explore career paths! Our psychology test identifies careers "
     "that match your personality and interests. Would you like to take the test?"),
    (("university", "school", "education"),
     "Our university finder helps you discover Nigerian universities offering "
     "programs that match your interests. What field of study are you considering?"),
    (("test", "psychology"),
     "Our psychology test assesses your personality, interests and aptitudes. "
     "It takes about 10-15 minutes and gives personalized career recommendations."),
    (("help", "how", "what"),
     "Here's what I can help with:\n"
     "- Career exploration and matching\n"
     "- University and program recommendations\n"
     "- Psychology-based career assessments\n"
     "- Educational pathway guidance"),
]

FALLBACK = (
    "I specialize in career guidance and educational planning. Tell me more "
    "about your goals and I'll point you in the right direction."
)


def get_bot_response(message: str) -> str:
    text = (message or "").lower()
    for keywords, reply in RULES:
        if any(k in text for k in keywords):
            return reply
    return FALLBACK
