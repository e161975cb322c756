"""Prompt templates for the three tasks.

User text is embedded verbatim.  Callers validate for blank input first.
"""
from __future__ import annotations

AD_COPY_PROMPT = """\
Act as an expert Google Ads copywriter. Given the following keywords, create a compelling set of ad copy.
Keywords: "{keywords}"

Please generate:
- 5 headlines (max 30 characters each).
- 3 long headlines (max 90 characters each).
- 4 descriptions (max 90 characters each).

Ensure the copy is relevant to the keywords, engaging, and follows Google Ads best practices to maximize Quality Score and click-through rate.
Return the result as a JSON object.
"""

PERFORMANCE_PROMPT = """\
As a senior Google Ads Strategist, analyze the following campaign components for potential Ad Rank and Quality Score.

1. Keywords: "{keywords}"
2. Existing Ad Copy: "{ad_copy}"
3. Landing Page URL: "{landing_page_url}"

Please access the provided URL, read its text content, and perform your analysis based on that content.

Provide a detailed analysis in a JSON object format with the following structure:
- "qualityScorePotential": A score from 1-10 on the potential Quality Score.
- "adRankPotential": A score from 1-10 on the potential Ad Rank.
- "overallAssessment": A brief summary of the campaign's strengths and weaknesses.
- "copySuggestions": An array of specific, actionable suggestions to improve the ad copy for better relevance and CTR.
- "landingPageSuggestions": An array of suggestions to improve the landing page content and user experience for higher conversion rates and relevance.
- "keywordSuggestions": An array of suggestions for keyword refinement, grouping, or expansion.
"""

NEGATIVE_KEYWORDS_PROMPT = """\
You are a Google Ads expert specializing in campaign optimization and preventing wasted ad spend.
Based on the primary keywords provided below, generate a comprehensive list of potential negative keywords.
Primary Keywords: "{keywords}"

For each negative keyword, suggest a match type (Broad, Phrase, or Exact). Focus on terms that are related but indicate a different user intent (e.g., "free", "jobs", "DIY", "reviews", "how to").
Return the result as a JSON array of objects, where each object has "keyword" and "matchType" properties.
"""


def build_ad_copy_prompt(keywords: str) -> str:
    return AD_COPY_PROMPT.format(keywords=keywords)


def build_performance_prompt(keywords: str, ad_copy: str, landing_page_url: str) -> str:
    return PERFORMANCE_PROMPT.format(
        keywords=keywords,
        ad_copy=ad_copy,
        landing_page_url=landing_page_url,
    )


def build_negative_keywords_prompt(keywords: str) -> str:
    return NEGATIVE_KEYWORDS_PROMPT.format(keywords=keywords)
