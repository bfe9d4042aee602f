# ResumeRover - ATS Resume Matcher
"""
ResumeRover - Resume-to-job compatibility analysis.

Upload a resume, paste a job posting, and get an ATS-style match score,
a keyword and skill breakdown, and recommendations for closing the gaps.
"""

__version__ = "1.0.0"
__author__ = "ResumeRover"
__description__ = "ATS-style resume to job description matcher"
