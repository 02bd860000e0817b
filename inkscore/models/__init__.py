# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User
from .handwriting_checkin import HandwritingCheckin
from .personality_snapshot import PersonalitySnapshot
from .user_profile import UserProfile
