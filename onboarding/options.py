"""Choice catalogs shown by the wizard prompts, as (label, value) pairs.

The state machine stores whatever value it is given; these lists only drive
what the prompts offer.
"""

DISCOVER_SOURCES = [
    ("Instagram", "instagram"),
    ("Twitter / X", "twitter"),
    ("LinkedIn", "linkedin"),
    ("YouTube", "youtube"),
    ("TikTok", "tiktok"),
    ("Other", "other"),
]

ROLES = [
    ("Student", "student"),
    ("Educator", "educator"),
]

# Student profile
ACADEMIC_BACKGROUNDS = [
    ("High School", "highschool"),
    ("Undergraduate", "undergraduate"),
    ("Postgraduate", "postgraduate"),
    ("Bootcamp / Certification", "bootcamp"),
    ("Other", "other"),
]
STUDY_YEARS = [
    ("First Year", "first"),
    ("Second Year", "second"),
    ("Third Year", "third"),
    ("Final Year", "final"),
    ("Other", "other"),
]
LEARNING_MODES = [
    ("Self-paced", "self-paced"),
    ("Instructor-led", "instructor-led"),
    ("Hybrid", "hybrid"),
]
WEEKLY_AVAILABILITY = [
    ("Less than 5 hours", "lt5"),
    ("5 - 10 hours", "5to10"),
    ("10 - 20 hours", "10to20"),
    ("20+ hours", "gt20"),
]
GRADUATION_YEARS = [(str(y), str(y)) for y in range(2024, 2032)]
INTERESTS = [
    ("Programming", "programming"),
    ("Data Science", "data-science"),
    ("Design", "design"),
    ("Business", "business"),
    ("Marketing", "marketing"),
    ("AI / ML", "ai"),
    ("Research Methods", "research"),
]

# Educator profile
EDUCATIONAL_BACKGROUNDS = [
    ("Bachelor's", "bachelors"),
    ("Master's", "masters"),
    ("PhD / Doctorate", "phd"),
    ("Diploma / Certification", "diploma"),
    ("Other", "other"),
]
DEGREE_FIELDS = [
    ("Computer Science", "computer-science"),
    ("Business / Management", "business"),
    ("Education / Pedagogy", "education"),
    ("Engineering", "engineering"),
    ("Arts / Design", "arts"),
    ("Sciences", "science"),
    ("Humanities", "humanities"),
    ("Other", "other"),
]
TEACHING_EXPERIENCE = [
    ("0 - 1 years", "0-1"),
    ("2 - 4 years", "2-4"),
    ("5 - 9 years", "5-9"),
    ("10+ years", "10+"),
]
CLASS_FORMATS = [
    ("Online", "online"),
    ("In-person", "in-person"),
    ("Hybrid", "hybrid"),
]
COLLABORATION_AREAS = [
    ("Curriculum Design", "curriculum"),
    ("Assessment", "assessment"),
    ("Mentoring", "mentoring"),
    ("Online Course Creation", "online-course"),
    ("Industry Partnerships", "industry"),
    ("Workshop Facilitation", "workshops"),
]
TEACHING_TOOLS = [
    ("Moodle", "moodle"),
    ("Canvas", "canvas"),
    ("Google Classroom", "google-classroom"),
    ("Zoom", "zoom"),
    ("Microsoft Teams", "teams"),
    ("GitHub Classroom", "github-classroom"),
]
CLASS_SIZES = [
    ("Less than 20", "lt20"),
    ("20 - 50", "20-50"),
    ("50 - 100", "50-100"),
    ("100+", "gt100"),
]
