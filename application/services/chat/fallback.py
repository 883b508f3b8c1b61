"""
Keyword-matched canned replies.

Used when AI is disabled or every AI attempt failed, so the user always
gets an answer.
"""

import random
import re
from typing import Dict, List, Optional, Sequence, Tuple

KNOWLEDGE_BASE: Dict[str, List[str]] = {
    "greetings": [
        "Hello! I'm Nandu. Ask me anything about design, AI, or my work!",
        "Hi there! I'd love to chat about product design, AI, or my portfolio.",
        "Hey! I'm here to answer your questions about my work in design and AI.",
    ],
    "design": [
        "I specialize in human-computer interaction and user experience design. I'm passionate about creating products that are useful, usable, and desirable.",
        "My design philosophy centers around understanding user needs and creating intuitive experiences. I've worked on AI-powered platforms like LivePerson's chat builder.",
        "Design isn't just about aesthetics, it's about solving real problems. I focus on creating experiences that matter, using both traditional design principles and modern AI tools.",
    ],
    "ai": [
        "AI is transforming product design. I have experience designing AI-powered chat platforms and analytics tools that help businesses understand and optimize customer interactions.",
        "Generative AI opens up new possibilities for designers. It can help with ideation, prototyping, and creating more personalized user experiences.",
        "I'm interested in how AI can enhance the design process while maintaining a human-centered approach. The best AI tools augment human creativity, not replace it.",
    ],
    "portfolio": [
        "I've worked on projects for companies like LivePerson, First American Title, and Terradatum. My portfolio includes AI chat builders, real estate analytics platforms, and mobile applications.",
        "Some notable projects I've worked on include AI Chat Analytics, AI Chat Builder, and the Aergo Real Estate Analytics Platform. Each project demonstrates my focus on user-centered design.",
        "You can explore my portfolio above to see detailed case studies of my work in product design, AI platforms, and user experience.",
    ],
    "experience": [
        "I have extensive experience in product design, working with cross-functional teams to bring ideas from concept to reality.",
        "My work spans web and mobile applications, with a particular focus on creating intuitive interfaces for complex data and AI systems.",
        "I combine design thinking with technical understanding to create products that are both beautiful and functional.",
    ],
    "skills": [
        "My skills include UI/UX design, human-computer interaction, prototyping, user research, and working with modern design tools like Figma.",
        "I'm experienced in designing for AI-powered platforms, understanding how to make complex systems feel simple and intuitive.",
        "Beyond design tools, I understand the technical aspects of product development, which helps me create designs that are both innovative and feasible.",
    ],
    "default": [
        "That's an interesting question! I'm passionate about creating products that make a difference. Would you like to know more about my design process or specific projects?",
        "Great question! I focus on combining design thinking with modern technology to solve real user problems. What aspect interests you most?",
        "I'd love to help! My work spans product design, AI platforms, and user experience. What would you like to explore further?",
    ],
}

# Checked in order; the first category whose pattern matches wins
KEYWORD_RULES: Tuple[Tuple[str, str], ...] = (
    ("greetings", r"\b(hi|hello|hey|greetings|good morning|good afternoon|good evening)\b"),
    ("design", r"\b(design|ui|ux|user experience|interface|visual|aesthetic|prototype|wireframe|figma|sketch)\b"),
    ("ai", r"\b(ai|artificial intelligence|machine learning|chatbot|generative|gpt|llm|neural)\b"),
    ("portfolio", r"\b(portfolio|projects|work|case study|examples|what has|what did|show me)\b"),
    ("experience", r"\b(experience|background|career|worked|companies|clients)\b"),
    ("skills", r"\b(skills|abilities|tools|technologies|what can|expertise)\b"),
)

DEFAULT_CATEGORY = "default"


class KeywordResponder:
    """Picks a canned reply for a message by keyword category."""

    def __init__(
        self,
        knowledge_base: Optional[Dict[str, Sequence[str]]] = None,
        rules: Sequence[Tuple[str, str]] = KEYWORD_RULES,
        rng: Optional[random.Random] = None,
    ):
        self.knowledge_base = knowledge_base or KNOWLEDGE_BASE
        if not self.knowledge_base.get(DEFAULT_CATEGORY):
            raise ValueError("knowledge base needs a non-empty 'default' category")
        self._rules = [(category, re.compile(pattern)) for category, pattern in rules]
        self._rng = rng or random.Random()

    def categorize(self, message: str) -> str:
        """Return the first category whose keywords appear in ``message``."""
        lowered = message.lower()
        for category, pattern in self._rules:
            if pattern.search(lowered) and self.knowledge_base.get(category):
                return category
        return DEFAULT_CATEGORY

    def respond(self, message: str) -> str:
        return self._rng.choice(list(self.knowledge_base[self.categorize(message)]))
