"""
Copy for the landing page. Templates render these; nothing here has behaviour.
"""

EVENT = {
    "badge": "URGENT OPPORTUNITY",
    "title_top": "EMERGENCY",
    "title_bottom": "MASTERMIND",
    "audience": "Realtors, lenders, and real estate partners, get ready to",
    "tagline": "INITIATE THE BETTER YOU",
    "subtitle": "This is your moment to breakthrough.",
    "date": "July 8th, 2024",
    "time": "7:00 PM",
    "location": "Online | Google meet",
}

FORM = {
    "heading": "Secure Your Spot",
    "subheading": "Join elite agents who are ready to transform",
    "submit_label": "CLAIM YOUR SPOT NOW",
    "submitting_label": "Securing Spot...",
    "footnote": "Limited seats available • Registration closes soon",
}

FEATURES = [
    {
        "icon": "target",
        "title": "Strategic Breakthrough",
        "body": "Discover the exact strategies top agents use to dominate their markets",
    },
    {
        "icon": "users",
        "title": "Elite Network",
        "body": "Connect with high-performing agents and build powerful partnerships",
    },
    {
        "icon": "trending-up",
        "title": "Immediate Results",
        "body": "Walk away with actionable tactics you can implement immediately",
    },
]

URGENCY = {
    "badge": "TIME SENSITIVE OPPORTUNITY",
    "heading": "Don't Let This Moment Pass",
    "lead": "The agents who show up on July 8th will be the ones who",
    "highlight": "initiate the better version of themselves",
    "question": "Will you be one of them?",
    "button": "SECURE YOUR TRANSFORMATION",
}
