"""
Contextual AI.

Context-aware content adaptation for the Contextually Personal AI platform.

Components:
- ContextualEngine: Environmental snapshot (location, device, connectivity)
- PersonalEngine: Learner snapshot (learning profile, behavior, accessibility)
- AdvancedAdaptationService: Offline-first, low-bandwidth and behavioral adapters
- AIEngine: Orchestration layer combining the engines and adapters
"""

__version__ = "1.0.0"
