"""
Recommendation engine.

Responsibilities:
- Compute BMI from weight and height.
- Derive ordered precaution tips from the user's profile.
- Infer concern tags and map them onto nutrition rows.
- Tier the budget and build product search queries with affiliate links.

Every function here is pure: same inputs, same outputs, no I/O.
"""
