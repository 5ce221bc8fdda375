"""
Domain constants - default landing page copy, dashboard placeholders and limits.
Centralized here so a fresh backend still renders a complete site.
"""

# === NAVIGATION ===
NAV_ITEMS = [
    {"name": "Home", "href": "#home"},
    {"name": "About", "href": "#about"},
    {"name": "Players", "href": "#players"},
    {"name": "Investment", "href": "#investment"},
    {"name": "Donations", "href": "#donations"},
    {"name": "Matches", "href": "#matches"},
    {"name": "News", "href": "#news"},
    {"name": "Contact", "href": "#contact"},
]

# === HERO CAROUSEL ===
HERO_SLIDES = [
    {
        "title": "Elite Football",
        "highlight": "Development",
        "text": (
            "Nurturing tomorrow's football stars through professional training, "
            "academic excellence, and community impact at Mafarah Ayew Football Academy."
        ),
        "image": "https://images.unsplash.com/photo-1459767129954-1b1c1f9b9ace?auto=format&fit=crop&q=80&w=1920",
    },
    {
        "title": "Train Like",
        "highlight": "A Professional",
        "text": "FIFA-standard pitches, qualified coaches and a pathway to the professional game.",
        "image": "https://images.unsplash.com/photo-1574629810360-7efbbe195018?auto=format&fit=crop&q=80&w=1920",
    },
    {
        "title": "Football For",
        "highlight": "The Community",
        "text": "Our NGO sporting club brings free training and equipment to underprivileged youth.",
        "image": "https://images.unsplash.com/photo-1431324155629-1a6deb1dec8d?auto=format&fit=crop&q=80&w=1920",
    },
]

# === ABOUT ===
ABOUT_VALUES = [
    {"title": "Excellence", "description": "Striving for the highest standards in football development and academic achievement."},
    {"title": "Community", "description": "Building strong connections and supporting our local community through sports."},
    {"title": "Integrity", "description": "Fostering honesty, respect, and sportsmanship in everything we do."},
    {"title": "Development", "description": "Comprehensive player development both on and off the field."},
]

# Default copy per section type, used when the sections table has no row for it
DEFAULT_SECTIONS = {
    "hero": {"title": "Elite Football Development", "content": None},
    "about": {
        "title": "About Mafarah Ayew",
        "content": (
            "Founded with a vision to develop exceptional football talent while making a positive "
            "impact in our community through our NGO sporting club."
        ),
    },
    "players": {
        "title": "Our Players",
        "content": (
            "Meet our talented athletes who represent the future of football. "
            "Each player brings unique skills and dedication to our academy."
        ),
    },
    "matches": {"title": "Fixtures & Results", "content": "Follow our teams through league, cup and friendly fixtures."},
    "news": {
        "title": "Latest News",
        "content": "Stay updated with the latest happenings at Mafarah Ayew Football Academy and our community initiatives.",
    },
    "donations": {
        "title": "Support Our Mission",
        "content": "Your donation helps us provide opportunities for young athletes and strengthen communities through football.",
    },
    "investment": {
        "title": "Investment Opportunities",
        "content": "Partner with us and share in the success of the next generation of football talent.",
    },
    "faq": {"title": "Frequently Asked Questions", "content": "Everything you need to know about the academy."},
    "contact": {
        "title": "Get In Touch",
        "content": (
            "Ready to join our academy or learn more about our programs? "
            "Contact us today and take the first step towards excellence."
        ),
    },
}

# Landing page order when the sections table is empty
DEFAULT_SECTION_ORDER = [
    "hero", "about", "players", "investment", "donations", "matches", "news", "faq", "contact",
]

# === PLAYERS ===
DEFAULT_PLAYERS = [
    {
        "name": "Kwame Asante", "position": "Forward", "age": 17, "nationality": "Ghana",
        "photo_url": "https://images.unsplash.com/photo-1472396961693-142e6e269027?auto=format&fit=crop&q=80&w=400",
        "stats": {"Goals": 24, "Assists": 8, "Apps": 32},
    },
    {
        "name": "Joseph Mensah", "position": "Midfielder", "age": 16, "nationality": "Ghana",
        "photo_url": "https://images.unsplash.com/photo-1466721591366-2d5fba72006d?auto=format&fit=crop&q=80&w=400",
        "stats": {"Goals": 12, "Assists": 18, "Apps": 30},
    },
    {
        "name": "Emmanuel Tetteh", "position": "Defender", "age": 18, "nationality": "Ghana",
        "photo_url": "https://images.unsplash.com/photo-1493962853295-0fd70327578a?auto=format&fit=crop&q=80&w=400",
        "stats": {"Goals": 3, "Assists": 5, "Apps": 35},
    },
    {
        "name": "Samuel Boateng", "position": "Goalkeeper", "age": 17, "nationality": "Ghana",
        "photo_url": "https://images.unsplash.com/photo-1518877593221-1f28583780b4?auto=format&fit=crop&q=80&w=400",
        "stats": {"Saves": 89, "Clean sheets": 18, "Apps": 28},
    },
]

# === MATCHES ===
UPCOMING_MATCHES = [
    {
        "opponent": "Accra Lions Academy", "date": "2024-06-15", "time": "15:00",
        "venue": "Mafarah Ayew Training Ground", "competition": "Youth League", "is_home": True,
    },
    {
        "opponent": "Golden Eagles FC", "date": "2024-06-22", "time": "14:30",
        "venue": "Eagles Stadium", "competition": "Regional Cup", "is_home": False,
    },
]

# Scores are home/away as played, not academy/opponent
RECENT_RESULTS = [
    {
        "opponent": "Tema Youth FC", "date": "2024-05-28", "home_score": 3, "away_score": 1,
        "competition": "Youth League", "is_home": True, "scorers": ["K. Asante (2)", "J. Mensah"],
    },
    {
        "opponent": "Cape Coast Academy", "date": "2024-05-21", "home_score": 2, "away_score": 2,
        "competition": "Friendly", "is_home": False, "scorers": ["E. Tetteh", "K. Asante"],
    },
    {
        "opponent": "Volta Stars FC", "date": "2024-05-14", "home_score": 4, "away_score": 0,
        "competition": "Youth League", "is_home": True, "scorers": ["K. Asante (3)", "S. Boateng"],
    },
]

# === NEWS ===
DEFAULT_NEWS = [
    {
        "title": "Academy Wins Regional Youth Championship",
        "excerpt": "Our U-17 team secured a decisive 3-1 victory in the final match, showcasing exceptional teamwork and skill development.",
        "image": "https://images.unsplash.com/photo-1487958449943-2429e8be8625?auto=format&fit=crop&q=80&w=600",
        "date": "2024-05-30", "author": "Coach Williams", "category": "Match Report",
    },
    {
        "title": "New Training Facility Opens",
        "excerpt": "State-of-the-art training complex with modern equipment and FIFA-standard pitches now available for all academy programs.",
        "image": "https://images.unsplash.com/photo-1496307653780-42ee777d4833?auto=format&fit=crop&q=80&w=600",
        "date": "2024-05-25", "author": "Academy Director", "category": "Facility News",
    },
    {
        "title": "Community Outreach Program Launch",
        "excerpt": "Our NGO sporting club initiates new community programs, providing free training and equipment to underprivileged youth.",
        "image": "https://images.unsplash.com/photo-1449157291145-7efd050a4d0e?auto=format&fit=crop&q=80&w=600",
        "date": "2024-05-20", "author": "NGO Coordinator", "category": "Community",
    },
]

# === DONATIONS ===
DONATION_AMOUNTS = ["25", "50", "100", "250", "500"]

DONATION_IMPACT_AREAS = [
    {"title": "Equipment & Facilities", "description": "Provide quality training equipment and maintain our facilities"},
    {"title": "Player Development", "description": "Support young athletes with training, nutrition, and education"},
    {"title": "Community Programs", "description": "Expand our reach to underserved communities across Ghana"},
]

# === INVESTMENT ===
INVESTMENT_OPTIONS = [
    {
        "id": "organization", "title": "Invest in Organization",
        "description": "Support our entire academy infrastructure and programs",
        "min_amount": "$5,000", "returns": "8-12% annually",
    },
    {
        "id": "team", "title": "Invest in Teams",
        "description": "Back specific teams and share in their success",
        "min_amount": "$2,500", "returns": "10-15% annually",
    },
    {
        "id": "player", "title": "Invest in Players",
        "description": "Sponsor individual talented players and their development",
        "min_amount": "$1,000", "returns": "15-25% annually",
    },
]

# === FAQ ===
DEFAULT_FAQS = [
    {
        "question": "What age groups do you accept at Mafarah Ayew Football Academy?",
        "answer": "We accept young athletes between the ages of 8-18 years old. Our programs are designed to cater to different skill levels and age groups to ensure proper development.",
        "category": "enrollment",
    },
    {
        "question": "What facilities are available at the academy?",
        "answer": "Our state-of-the-art facilities include FIFA-standard pitches, modern training equipment, fitness centers, medical facilities, and comfortable accommodation for residential programs.",
        "category": "facilities",
    },
    {
        "question": "Do you provide academic education alongside football training?",
        "answer": "Yes, we believe in holistic development. Our programs combine intensive football training with quality academic education to prepare our players for success both on and off the pitch.",
        "category": "general",
    },
    {
        "question": "How can I apply to join the academy?",
        "answer": "You can apply by contacting us through our website or visiting our facilities. We conduct regular trials and assessments to identify talented young players.",
        "category": "enrollment",
    },
    {
        "question": "What support does the NGO sporting club provide?",
        "answer": "Our NGO sporting club provides free training and equipment to underprivileged youth, organizes community tournaments, and creates safe spaces for young people to develop their athletic abilities.",
        "category": "community",
    },
]

FAQ_CATEGORIES = ["general", "enrollment", "facilities", "community", "investment", "donations"]

# === CONTACT ===
CONTACT_PHONES = ["+233 20 456 7890", "+233 54 123 4567"]
CONTACT_ADDRESS = "Mafarah Ayew Training Ground, Accra, Ghana"
CONTACT_HOURS = "Mon - Sat: 8:00 AM - 6:00 PM"

# === AUTH ===
DEMO_ACCOUNTS = {
    "admin": {"email": "admin@mafarah.com", "password": "admin123"},
    "investor": {"email": "investor@mafarah.com", "password": "investor123"},
    "player": {"email": "player@mafarah.com", "password": "player123"},
}
MIN_PASSWORD_LENGTH = 6

# === DASHBOARDS ===
DASHBOARD_LABELS = {
    "admin": "Admin Dashboard",
    "investor": "Investor Dashboard",
    "player": "Player Dashboard",
    "partner": "Partner Dashboard",
}

# Placeholder figures until real per-role data exists
INVESTOR_STATS = [
    {"title": "Total Invested", "value": "$25,000"},
    {"title": "Active Investments", "value": "5"},
    {"title": "ROI", "value": "12.5%"},
    {"title": "Player Progress", "value": "85%"},
]
PLAYER_STATS = [
    {"title": "Matches Played", "value": "12"},
    {"title": "Goals Scored", "value": "8"},
    {"title": "Assists", "value": "5"},
    {"title": "Training Hours", "value": "45"},
    {"title": "Upcoming Matches", "value": "3"},
    {"title": "Skill Rating", "value": "78"},
]
PARTNER_STATS = [
    {"title": "Active Partnerships", "value": "3"},
    {"title": "Total Contributions", "value": "$15,000"},
    {"title": "Events Hosted", "value": "8"},
    {"title": "Players Supported", "value": "25"},
    {"title": "Partnership Value", "value": "$50,000"},
    {"title": "Upcoming Events", "value": "2"},
]

# Action cards rendered with a disabled "coming soon" button
INVESTOR_ACTIONS = [
    "Portfolio Overview", "Investment Analytics", "New Investment",
    "Player Development", "Financial Reports", "Support",
]
PLAYER_ACTIONS = ["Training Schedule", "Performance Stats", "Match Calendar", "My Profile"]
PARTNER_ACTIONS = ["Partnership Overview", "Event Management", "Impact Reports", "Contact Academy"]

# site_statistics metric names shown on the admin dashboard
ADMIN_METRICS = [
    ("monthly_visitors", "Monthly Visitors"),
    ("total_matches", "Total Matches"),
    ("blog_posts", "Blog Posts"),
    ("active_programs", "Active Programs"),
    ("scholarship_recipients", "Scholarship Recipients"),
]

RECENT_POSTS_LIMIT = 5

# === CMS ===
CMS_TABS = [
    {"id": "sections", "label": "Sections", "description": "Manage website sections"},
    {"id": "pages", "label": "Pages", "description": "Manage custom pages"},
    {"id": "players", "label": "Players", "description": "Manage academy players"},
    {"id": "partners", "label": "Partners", "description": "Manage partners & investors"},
    {"id": "faqs", "label": "FAQs", "description": "Manage frequently asked questions"},
    {"id": "blog", "label": "Blog", "description": "Manage news and blog posts"},
    {"id": "messages", "label": "Messages", "description": "Contact form inbox"},
    {"id": "media", "label": "Media", "description": "Upload and organise images"},
]
PLAYER_POSITIONS = ["Goalkeeper", "Defender", "Midfielder", "Forward"]
PARTNER_TYPES = ["sponsor", "investor", "partner", "supplier"]
PARTNER_TIERS = ["platinum", "gold", "silver", "bronze"]
