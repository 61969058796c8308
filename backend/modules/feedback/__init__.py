"""
Feedback module.

Free-text product feedback from signed-in users.
"""

from .models import Feedback, SubmitFeedbackRequest

__all__ = ["Feedback", "SubmitFeedbackRequest"]
