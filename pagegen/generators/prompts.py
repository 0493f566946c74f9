"""
pagegen/generators/prompts.py
Prompt data for the Bedrock generator: one random category per page,
substituted into WEBSITE_PROMPT wherever {{CATEGORY}} appears.
"""

import random
from typing import Optional

CATEGORY_PLACEHOLDER = "{{CATEGORY}}"

WEBSITE_CATEGORIES: tuple[str, ...] = (
    "Tech News Portal",
    "Weather Forecast Dashboard",
    "Literary Magazine",
    "Cryptocurrency Exchange",
    "Indie Game Showcase",
    "Minimalist Lifestyle Blog",
    "Virtual Art Gallery",
    "Scientific Research Database",
    "Gourmet Recipe Collection",
    "Cyberpunk-themed E-commerce",
    "Environmental Conservation NGO",
    "Interactive Children's Storybook",
    "Futuristic Smart Home Control Panel",
    "Retro Arcade Game Leaderboard",
    "Luxury Watch Boutique",
    "Space Exploration News Site",
    "Mindfulness and Meditation App",
    "Sustainable Fashion Marketplace",
    "Graphic Novel Reader",
    "Artificial Intelligence Chatbot Interface",
    "Virtual Reality Travel Experience",
    "Experimental Music Composition Tool",
    "Citizen Journalism Platform",
    "Genealogy and Family Tree Builder",
    "Quantum Computing Educational Resource",
    "Artisanal Coffee Roaster",
    "Vintage Photograph Restoration Service",
    "Urban Gardening Community",
    "Blockchain Voting System",
    "Handcrafted Furniture Showcase",
    "Exotic Pet Care Information Center",
    "Fantasy Sports League Manager",
    "Collaborative Fiction Writing Platform",
    "Augmented Reality Art Installation Guide",
    "Sustainable Energy Solutions Marketplace",
    "Historical Reenactment Society",
    "Rare Book Collector's Network",
    "Underwater Photography Portfolio",
    "Personalized Nutrition Plan Generator",
    "Autonomous Vehicle News and Reviews",
    "Interactive Music Theory Tutor",
    "Minimalist Productivity Tool Suite",
    "Bespoke Tailoring Service",
    "Drone Racing League",
    "Foraging and Wild Edibles Guide",
    "Competitive Esports Team Profile",
    "Traditional Craft Preservation Society",
    "Tiny House Design and Living Blog",
    "Asteroid Mining Company",
    "Bioluminescent Organism Database",
    "Virtual Fashion Show Platform",
    "Neurofeedback Meditation Tracker",
    "Architectural Acoustics Consultancy",
    "Holographic Display Art Gallery",
    "Extinct Language Learning Resource",
    "Eco-friendly Packaging Design Showcase",
    "Competitive Rubik's Cube Solving Community",
    "Biohacking and Human Augmentation Forum",
    "Generative Art Creation Tool",
    "Sustainable Urban Planning Simulator",
    "Microgravity Experiment Database",
    "Artisanal Cheese Aging Tracker",
    "Cryptozoology Evidence Archive",
    "Futuristic Transportation Concept Showcase",
    "Interactive Periodic Table Explorer",
    "Experimental Theater Production Platform",
    "Bonsai Cultivation Masterclass",
    "Synthetic Biology Design Tool",
    "Psychedelic Art Therapy Resource",
    "Ancient Civilization Mystery Solver",
    "Extreme Weather Photography Gallery",
    "Fermentation Process Monitoring App",
    "Origami Design and Sharing Platform",
    "Ethical Hacking Tutorial Series",
    "Particle Physics Visualization Tool",
    "Retro Computing Emulator Collection",
    "Urban Exploration Safety Guide",
    "Collaborative Music Remix Platform",
    "Insect-based Cuisine Recipe Blog",
    "Sustainable Architecture Portfolio",
    "Time Capsule Creation Service",
    "Geocaching Adventure Planner",
    "Competitive Drone Obstacle Course",
    "Minimalist Watch Face Designer",
    "Fractal Art Generator",
    "Sensory Deprivation Float Center Locator",
    "Abandoned Places Photography Tour",
    "Acoustic Levitation Experiment Guide",
    "Bioluminescent Landscaping Service",
    "Sustainable Tiny House Community",
    "Exoplanet Discovery News Aggregator",
    "Interactive Optical Illusion Gallery",
    "Molecular Gastronomy Technique Database",
    "Autonomous Robot Building Competition",
    "Experimental Typography Showcase",
    "Lucid Dreaming Journal and Guide",
    "Underwater Cave Mapping Project",
    "Customizable Hologram Message Creator",
    "Zero-Waste Lifestyle Community",
    "Experimental Musical Instrument Maker",
)

WEBSITE_PROMPT = """You are a senior UI designer. Build a complete, polished, single-file HTML page for a "{{CATEGORY}}" website.

Requirements:

1. Output one self-contained HTML document with inline CSS only. It must start with <!DOCTYPE html> and end with </html>. Write nothing before or after it.

2. Use semantic HTML5 with proper accessibility: landmark elements, a sensible heading hierarchy, ARIA attributes where they help, meaningful alt text.

3. Give the page its own design system suited to {{CATEGORY}}:
   - a color palette defined with CSS custom properties
   - a typography pairing that fits the {{CATEGORY}} audience
   - a responsive layout built with Flexbox and CSS Grid
   - small, purposeful transitions and animations
   - at least three advanced CSS techniques (clip-path, backdrop-filter, masks, shapes, blend modes)

4. Design a distinctive navbar for {{CATEGORY}} that stays usable on every screen size.

5. Include a hero section, several content sections and a footer with realistic copy, headings and calls to action written for {{CATEGORY}}.

6. Use Lorem Picsum for every image: https://picsum.photos/seed/[RANDOM_SEED]/width/height

7. Support both light and dark color schemes and keep the file size reasonable.

Generate only the HTML and inline CSS for this {{CATEGORY}} page, starting with <!DOCTYPE html> and ending with </html>. Do not include any explanations or additional text."""


def pick_category(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(WEBSITE_CATEGORIES)


def build_prompt(category: str, template: str = WEBSITE_PROMPT) -> str:
    return template.replace(CATEGORY_PLACEHOLDER, category)
