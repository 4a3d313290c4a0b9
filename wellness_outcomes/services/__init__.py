"""Wellness Outcomes services.

- Analytics Service: clinical, productivity, engagement and ROI analytics
  per organization, with the minimum-cohort privacy rule
- Report Service: HTML executive report rendered from an analytics snapshot
"""
