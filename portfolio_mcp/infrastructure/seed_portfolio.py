"""Seed Portfolio — bundled dataset served when no PORTFOLIO_DATA_PATH is configured.

Invariants:
    - Same camelCase shape as a dataset JSON file; validated by Portfolio on load
    - Ids are fixed strings so callers (and tests) can address entities directly
    - Every date carries an explicit UTC offset
"""

_UPDATED = "2024-06-01T12:00:00Z"


def _skill(
    id, name, category, level, proficiency, description, icon, color,
    years, projects, tags, applications, integrations,
):
    return {
        "id": id,
        "name": name,
        "category": category,
        "level": level,
        "proficiency": proficiency,
        "description": description,
        "icon": icon,
        "color": color,
        "yearsOfExperience": years,
        "projectCount": projects,
        "tags": tags,
        "applications": applications,
        "integrations": integrations,
        "lastUpdated": _UPDATED,
        "isActive": True,
    }


SKILLS = [
    # Adobe Creative Suite
    _skill(
        "skill-illustrator", "Adobe Illustrator", "adobe", "advanced", 85,
        "Vector graphics, logo design, illustrations, and brand identity creation",
        "fab fa-adobe", "#FF0000", 2.5, 15,
        ["vector-graphics", "logo-design", "branding", "illustrations"],
        ["Logo design", "Brand identity", "Vector illustrations", "Icon creation", "Print graphics"],
        ["Photoshop", "After Effects", "Web Development"],
    ),
    _skill(
        "skill-photoshop", "Adobe Photoshop", "adobe", "advanced", 80,
        "Photo manipulation, digital art, compositing, and visual effects",
        "fab fa-adobe", "#FF0000", 2.5, 20,
        ["photo-editing", "digital-art", "compositing", "retouching"],
        ["Photo enhancement", "Digital compositing", "Digital art", "UI/UX design"],
        ["Illustrator", "After Effects", "Photography"],
    ),
    _skill(
        "skill-after-effects", "Adobe After Effects", "adobe", "intermediate", 70,
        "Motion graphics, animations, visual effects, and video compositing",
        "fab fa-adobe", "#FF0000", 1.5, 8,
        ["motion-graphics", "animation", "visual-effects", "video"],
        ["Logo animations", "Motion graphics", "Video effects", "Social media content"],
        ["Illustrator", "Photoshop", "Premiere Pro", "Music Composition"],
    ),
    _skill(
        "skill-premiere", "Adobe Premiere Pro", "adobe", "intermediate", 65,
        "Video editing, color grading, audio mixing, and post-production",
        "fab fa-adobe", "#FF0000", 1.5, 6,
        ["video-editing", "post-production", "color-grading", "audio"],
        ["Video editing", "Color grading", "Audio mixing", "Post-production"],
        ["After Effects", "Videography", "Music Composition"],
    ),
    _skill(
        "skill-indesign", "Adobe InDesign", "adobe", "intermediate", 60,
        "Layout design, typography, print materials, and publication design",
        "fab fa-adobe", "#FF0000", 1, 4,
        ["layout-design", "typography", "print-design", "publications"],
        ["Layout design", "Typography", "Print materials", "Publication design"],
        ["Illustrator", "Photoshop"],
    ),
    # Programming
    _skill(
        "skill-python", "Python", "programming", "intermediate", 75,
        "Automation scripts, data visualization, and creative coding projects",
        "fab fa-python", "#007ACC", 1.5, 12,
        ["automation", "data-visualization", "scripting", "creative-coding"],
        ["Design automation", "Data visualization", "Image processing", "Generative art"],
        ["Adobe Creative Suite", "Photography", "Web Development"],
    ),
    _skill(
        "skill-html-css", "HTML/CSS", "programming", "advanced", 80,
        "Web design, responsive layouts, and interactive experiences",
        "fab fa-html5", "#007ACC", 2, 10,
        ["web-design", "responsive-design", "css-animations", "frontend"],
        ["Responsive design", "Visual design", "CSS animations", "Accessibility"],
        ["Design Software", "Python", "Photography", "Video Content"],
    ),
    _skill(
        "skill-java", "Java", "programming", "beginner", 45,
        "Application development and programming fundamentals",
        "fab fa-java", "#007ACC", 0.5, 3,
        ["application-development", "programming-fundamentals", "oop"],
        ["Application development", "Programming fundamentals"],
        ["Python", "Web Development"],
    ),
    # Creative
    _skill(
        "skill-photography", "Photography", "creative", "advanced", 85,
        "Composition, lighting, post-processing, and visual storytelling",
        "fas fa-camera", "#FFD700", 3, 25,
        ["composition", "lighting", "post-processing", "visual-storytelling"],
        ["Portrait work", "Landscape photography", "Product photography", "Event documentation"],
        ["Photoshop", "Videography", "Python", "Design Projects"],
    ),
    _skill(
        "skill-videography", "Videography", "creative", "intermediate", 70,
        "Cinematography, directing, and video production",
        "fas fa-video", "#FFD700", 2, 8,
        ["cinematography", "directing", "video-production", "storytelling"],
        ["Cinematography", "Video production", "Storytelling", "Content creation"],
        ["Photography", "After Effects", "Premiere Pro"],
    ),
    _skill(
        "skill-music", "Music Composition", "creative", "intermediate", 65,
        "Audio production, sound design, and multimedia integration",
        "fas fa-music", "#FFD700", 2.5, 6,
        ["audio-production", "sound-design", "composition", "multimedia"],
        ["Music composition", "Sound design", "Audio production", "Multimedia integration"],
        ["After Effects", "Premiere Pro", "Python"],
    ),
]

# related skills reference peers by name
SKILLS[0]["relatedSkills"] = ["Adobe Photoshop", "Adobe InDesign"]
SKILLS[1]["relatedSkills"] = ["Adobe Illustrator", "Photography"]
SKILLS[5]["relatedSkills"] = ["HTML/CSS", "Java"]


PROJECTS = [
    {
        "id": "project-portfolio-website",
        "title": "Personal Portfolio Website",
        "slug": "personal-portfolio-website",
        "description": (
            "A comprehensive portfolio website built from scratch using modern "
            "HTML5, CSS3, and JavaScript, featuring responsive design, "
            "animations, and performance optimization."
        ),
        "shortDescription": "Modern portfolio website with responsive design and animations",
        "category": "web-design",
        "status": "published",
        "featured": True,
        "technologies": ["HTML5", "CSS3", "JavaScript", "Responsive Design"],
        "skillsUsed": ["HTML/CSS", "JavaScript", "Adobe Photoshop", "Adobe Illustrator"],
        "tools": ["VS Code", "Git", "Adobe Creative Suite"],
        "duration": "3 weeks",
        "role": "Full-Stack Designer & Developer",
        "images": [
            {
                "id": "image-portfolio-hero",
                "url": "/images/portfolio-website-hero.jpg",
                "alt": "Portfolio website hero section",
                "isPrimary": True,
            },
        ],
        "liveUrl": "https://gary-portfolio.com",
        "githubUrl": "https://github.com/gary/portfolio",
        "year": 2024,
        "tags": ["portfolio", "responsive", "animations", "performance"],
        "challenges": ["Creating smooth animations", "Optimizing for mobile", "Fast loading times"],
        "solutions": [
            "CSS animations with GPU acceleration", "Mobile-first design",
            "Critical CSS inlining",
        ],
        "results": [
            "Under 2-second loading time", "Perfect mobile experience",
            "Professional presentation",
        ],
        "createdAt": "2024-01-15T00:00:00Z",
        "updatedAt": "2024-05-20T09:30:00Z",
        "views": 150,
        "likes": 25,
        "shares": 8,
    },
    {
        "id": "project-brand-identity",
        "title": "Brand Identity Design",
        "slug": "brand-identity-design",
        "description": (
            "Complete brand identity package for a local business including logo "
            "design, color palette, typography, and brand guidelines."
        ),
        "shortDescription": "Complete brand identity package with logo and guidelines",
        "category": "branding",
        "status": "published",
        "featured": True,
        "technologies": ["Vector Graphics", "Color Theory", "Typography"],
        "skillsUsed": ["Adobe Illustrator", "Adobe Photoshop", "Adobe InDesign"],
        "tools": ["Adobe Creative Suite", "Pantone Color Guide"],
        "duration": "2 weeks",
        "client": "Local Business",
        "role": "Brand Designer",
        "images": [
            {
                "id": "image-brand-logo",
                "url": "/images/brand-identity-logo.jpg",
                "alt": "Brand identity logo design",
                "isPrimary": True,
            },
        ],
        "year": 2024,
        "tags": ["branding", "logo-design", "identity", "guidelines"],
        "challenges": ["Creating memorable identity", "Scalable design", "Brand consistency"],
        "solutions": [
            "Research-driven design", "Vector-based graphics", "Comprehensive guidelines",
        ],
        "results": [
            "Increased brand recognition", "Consistent brand application",
            "Client satisfaction",
        ],
        "createdAt": "2024-02-01T00:00:00Z",
        "updatedAt": "2024-04-10T15:00:00Z",
        "views": 89,
        "likes": 15,
        "shares": 5,
    },
    {
        "id": "project-motion-graphics",
        "title": "Motion Graphics Animation",
        "slug": "motion-graphics-animation",
        "description": (
            "Animated logo sequence and promotional video graphics for social "
            "media marketing campaign."
        ),
        "shortDescription": "Animated logo and promotional graphics for social media",
        "category": "motion-graphics",
        "status": "published",
        "featured": False,
        "technologies": ["Motion Graphics", "Animation", "Video Editing"],
        "skillsUsed": ["Adobe After Effects", "Adobe Premiere Pro", "Adobe Illustrator"],
        "tools": ["Adobe Creative Suite", "Cinema 4D"],
        "duration": "1 week",
        "client": "Marketing Agency",
        "role": "Motion Graphics Designer",
        "images": [
            {
                "id": "image-motion-preview",
                "url": "/images/motion-graphics-preview.jpg",
                "alt": "Motion graphics animation preview",
                "isPrimary": True,
            },
        ],
        "videoUrl": "https://vimeo.com/example",
        "year": 2024,
        "tags": ["motion-graphics", "animation", "social-media", "marketing"],
        "challenges": ["Smooth animations", "Brand consistency", "Multiple formats"],
        "solutions": ["Keyframe optimization", "Style guide adherence", "Template creation"],
        "results": ["Increased engagement", "Brand awareness", "Campaign success"],
        "createdAt": "2024-03-01T00:00:00Z",
        "updatedAt": "2024-03-18T11:45:00Z",
        "views": 67,
        "likes": 12,
        "shares": 3,
    },
]


CONTACT = {
    "email": "gary@example.com",
    "phone": "+1 555 0100",
    "location": "United States",
    "website": "https://gary-portfolio.com",
    "socialLinks": [
        {
            "platform": "LinkedIn", "url": "https://linkedin.com/in/gary",
            "username": "gary", "icon": "fab fa-linkedin", "isActive": True,
        },
        {
            "platform": "GitHub", "url": "https://github.com/gary",
            "username": "gary", "icon": "fab fa-github", "isActive": True,
        },
        {
            "platform": "Behance", "url": "https://behance.net/gary",
            "username": "gary", "icon": "fab fa-behance", "isActive": True,
        },
        {
            "platform": "Instagram", "url": "https://instagram.com/gary",
            "username": "gary", "icon": "fab fa-instagram", "isActive": True,
        },
        {
            "platform": "Dribbble", "url": "https://dribbble.com/gary",
            "icon": "fab fa-dribbble", "isActive": False,
        },
    ],
    "availability": "available",
    "preferredContact": "email",
    "timezone": "America/New_York",
    "languages": ["English"],
}


ACHIEVEMENTS = [
    {
        "id": "achievement-portfolio-launch",
        "title": "Portfolio Website Launch",
        "description": "Successfully launched comprehensive portfolio website with advanced features",
        "date": "2024-01-15T00:00:00Z",
        "category": "Web Development",
        "icon": "fas fa-rocket",
        "isPublic": True,
    },
    {
        "id": "achievement-first-client",
        "title": "First Client Project",
        "description": "Completed first professional brand identity project for local business",
        "date": "2024-02-01T00:00:00Z",
        "category": "Design",
        "icon": "fas fa-award",
        "isPublic": True,
    },
    {
        "id": "achievement-motion-milestone",
        "title": "Motion Graphics Milestone",
        "description": "Created first professional motion graphics animation for marketing campaign",
        "date": "2024-03-01T00:00:00Z",
        "category": "Animation",
        "icon": "fas fa-play",
        "isPublic": True,
    },
]


SEED_PORTFOLIO = {
    "id": "portfolio-gary",
    "title": "Gary's Graphic Design Portfolio",
    "subtitle": "Creative Graphic Designer & Digital Artist",
    "description": (
        "Versatile creative professional combining artistic vision with technical "
        "expertise. Passionate about creating compelling visual experiences across "
        "digital and traditional media."
    ),
    "tagline": "Bringing ideas to life through visual storytelling",
    "bio": (
        "I am a passionate graphic designer with expertise in Adobe Creative Suite, "
        "programming, and creative arts. I specialize in creating compelling visual "
        "experiences that combine artistic vision with technical precision."
    ),
    "name": "Gary",
    "profession": "Graphic Designer & Digital Artist",
    "location": "United States",
    "profileImage": "/images/gary-profile.jpg",
    "skills": SKILLS,
    "projects": PROJECTS,
    "achievements": ACHIEVEMENTS,
    "contact": CONTACT,
    "stats": {
        "totalProjects": len(PROJECTS),
        "totalSkills": len(SKILLS),
        "yearsOfExperience": 3,
        "clientsSatisfied": 5,
        "projectsCompleted": 15,
        "skillCategories": 3,
        "certifications": 2,
        "awards": 1,
    },
    "theme": "default",
    "language": "en",
    "version": "1.0.0",
    "createdAt": "2024-01-01T00:00:00Z",
    "updatedAt": _UPDATED,
}
