"""Landing page content document: read, save and reset against a key-value store."""

import copy
import json
import logging

from backend.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = 'landingPageContent'

DEFAULT_CONTENT = {
    'home': {
        'badge': '🎨 Nursery to 7th Grade Excellence',
        'title': 'Where Young Minds',
        'titleHighlight': 'Grow & Thrive',
        'subtitle': (
            'A nurturing primary school environment where children from Nursery to 7th grade '
            'develop strong foundations in academics, character, and creativity through engaging, '
            'age-appropriate learning experiences! 🌈'
        ),
        'applyButtonText': 'Apply Now 🚀',
        'learnMoreButtonText': 'Learn More 📚',
        'stats': {
            'students': {'value': '400+', 'label': 'Happy Students 🎓'},
            'ratio': {'value': '30:1', 'label': 'Student-Teacher 👥'},
            'years': {'value': '10+', 'label': 'Years of Fun 🎉'},
        },
    },
    'about': {
        'title': 'About Our',
        'titleHighlight': 'Primary School',
        'description': (
            "For over 25 years, we've been nurturing young minds from Nursery to 7th grade! "
            'Our primary school creates a safe, joyful environment where children build strong '
            'academic foundations while developing confidence, creativity, and essential life skills '
            'through play-based and experiential learning. 🌈✨'
        ),
        'missionTitle': 'Our Mission',
        'missionText': (
            'To nurture curious, confident, and kind young learners by providing an engaging primary '
            'education that sparks imagination, builds strong foundations, and instills values that '
            'will guide them throughout their educational journey and beyond! 🚀💫'
        ),
        'features': [
            {
                'title': 'Age-Appropriate Learning',
                'description': 'Engaging curriculum designed for young learners from Nursery through 7th grade.',
                'emoji': '📚',
            },
            {
                'title': 'Caring Teachers',
                'description': 'Dedicated educators who understand child development and create nurturing environments.',
                'emoji': '👩‍🏫',
            },
            {
                'title': 'Holistic Development',
                'description': 'Focus on academics, arts, sports, and social-emotional learning.',
                'emoji': '🏆',
            },
            {
                'title': 'Small Class Sizes',
                'description': 'Individual attention with a 15:1 student-teacher ratio for personalized learning.',
                'emoji': '🎯',
            },
            {
                'title': 'Creative Programs',
                'description': 'Art, music, drama, and hands-on activities that spark imagination and creativity.',
                'emoji': '🎨',
            },
            {
                'title': 'Safe Environment',
                'description': 'Warm, secure campus where children feel loved, valued, and excited to learn.',
                'emoji': '💖',
            },
        ],
    },
    'gallery': {
        'title': 'Campus',
        'titleHighlight': 'Gallery',
        'description': 'Explore our colorful facilities and vibrant campus life! 🏫🎉',
        'images': [
            {'src': '/gallery-field-trip-1.jpeg', 'title': 'Educational Trip', 'category': 'Activities', 'emoji': '🎒'},
            {'src': '/gallery-achievement.jpeg', 'title': 'Student Achievement', 'category': 'Awards', 'emoji': '🏆'},
            {'src': '/gallery-students-1.jpeg', 'title': 'Happy Students', 'category': 'Activities', 'emoji': '😊'},
            {'src': '/gallery-field-trip-2.jpeg', 'title': 'Outdoor Learning', 'category': 'Activities', 'emoji': '🌳'},
            {'src': '/gallery-students-2.jpeg', 'title': 'Our Bright Stars', 'category': 'Students', 'emoji': '⭐'},
        ],
    },
    'contact': {
        'title': 'Get in',
        'titleHighlight': 'Touch',
        'description': (
            "Interested in enrolling your child? We'd love to show you around our school and answer "
            'any questions about our Nursery to 7th grade programs! 🏫✨'
        ),
        'phone': '+917654637472',
        'email': 'rntpublics@gmail.com',
        'address': '123 Education Street, Learning City',
        'formTitle': 'Send Us a Message 💌',
        'formDescription': 'We typically respond within 24 hours! ⏰',
    },
}


def default_content() -> dict:
    return copy.deepcopy(DEFAULT_CONTENT)


class LandingPageContentStore:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get(self) -> dict:
        """Return the saved document, initializing storage with the default when none is usable."""
        try:
            stored = self.store.get(STORAGE_KEY)
            if stored:
                return json.loads(stored)
        except (OSError, ValueError, TypeError):
            logger.exception('Error loading landing page content.')

        self.save(DEFAULT_CONTENT)
        return default_content()

    def save(self, content: dict) -> None:
        try:
            self.store.set(STORAGE_KEY, json.dumps(content, ensure_ascii=False))
        except (OSError, ValueError, TypeError):
            logger.exception('Error saving landing page content.')

    def reset(self) -> None:
        self.save(DEFAULT_CONTENT)
