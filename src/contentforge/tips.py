"""Writing tips shown alongside generated content."""

from __future__ import annotations

import random

from contentforge._types import WritingTip

WRITING_TIPS: dict[str, tuple[WritingTip, ...]] = {
    "article": (
        WritingTip(
            "Lead with the news",
            "Answer the most important of the 5 Ws in the opening paragraph. "
            "Readers decide within seconds whether to keep going.",
        ),
        WritingTip(
            "Use the inverted pyramid",
            "Put the critical facts first, supporting detail next and background last.",
        ),
        WritingTip(
            "Attribute every claim",
            "Tie each statistic or contested fact to a named, verifiable source.",
            'Instead of "Experts say screen time is harmful," name the researcher and the study.',
        ),
        WritingTip(
            "Vary sentence length for rhythm",
            "Mix short sentences with longer explanatory ones to keep readers engaged.",
        ),
        WritingTip(
            "Use active voice",
            "Active voice is direct. Keep the passive for when the actor is unknown.",
            'Passive: "The policy was approved by the board." Active: "The board approved the policy."',
        ),
        WritingTip(
            "End with impact",
            "Close on a forward-looking statement or an open question instead of a summary.",
        ),
    ),
    "blog": (
        WritingTip(
            "Hook them in the first line",
            "Open with a bold statement, a surprising number or a relatable question.",
        ),
        WritingTip(
            "Write like you talk",
            "Read the draft aloud. If it sounds like a textbook, rewrite it.",
        ),
        WritingTip(
            "Use subheadings as signposts",
            "A skimmer should follow the whole argument from the subheadings alone.",
        ),
        WritingTip(
            "Include one actionable takeaway per section",
            "Leave the reader something to do or apply after every section.",
        ),
        WritingTip(
            "Optimize for shareability",
            "Write at least one quotable line that carries the main idea.",
        ),
        WritingTip(
            "Close with a question or CTA",
            "Invite a comment, a share or a specific next step.",
        ),
    ),
    "social": (
        WritingTip(
            "Front-load the value",
            'Put the hook in the first line, before the "see more" cut.',
        ),
        WritingTip(
            "One post, one idea",
            "A focused post with one takeaway outperforms a scattered one.",
        ),
        WritingTip(
            "Write for the platform, not for yourself",
            "LinkedIn rewards insight, X rewards brevity, Instagram rewards visual context.",
        ),
        WritingTip(
            "Use line breaks generously",
            "Dense paragraphs are unreadable on mobile. Use white space.",
        ),
        WritingTip(
            "End with engagement bait (the good kind)",
            "Ask a genuine question or invite opinions.",
        ),
    ),
    "press": (
        WritingTip(
            "Follow the standard structure",
            "Headline, dateline, lead paragraph, body with quotes, boilerplate, media contact.",
        ),
        WritingTip(
            "Write the headline like a news editor",
            "Factual and specific, without marketing fluff.",
            'Bad: "Exciting New Partnership to Transform Education!" '
            'Good: "StateU Partners with NPR to Launch Student Journalism Fellowship Program"',
        ),
        WritingTip(
            "Include a strong quote",
            "Quote a spokesperson who adds opinion, vision or context.",
        ),
        WritingTip("Keep it to one page", "Aim for 400-500 words."),
        WritingTip("Use AP Style", "Follow AP style for dates, numbers, titles and punctuation."),
        WritingTip(
            "Make it easy to act on",
            "Include a media contact with a real name, phone number and email.",
        ),
    ),
    "script": (
        WritingTip(
            "Write for the ear, not the eye",
            "Use short sentences, conversational phrasing and contractions.",
            'Written: "The organization has been operational since 2018." '
            'Script: "They have been at it since 2018."',
        ),
        WritingTip(
            "Time your script accurately",
            "About 150 spoken words make one minute.",
        ),
        WritingTip(
            "Use visual and audio cues",
            "Mark visuals, sound and transitions with [SFX], [VO], [CUT TO].",
        ),
        WritingTip(
            "Front-load every segment",
            "State each segment's payoff in its opening line.",
        ),
        WritingTip(
            "Write in the present tense",
            "Present tense feels immediate and cinematic.",
        ),
        WritingTip(
            "Keep transitions smooth",
            "Connect every scene to the next with a phrase or an audio bridge.",
        ),
    ),
    "ad-copy": (
        WritingTip(
            "Lead with the benefit, not the feature",
            "Turn every feature into a benefit that answers a real need.",
            'Feature: "AI-powered scheduling." Benefit: "Never miss a deadline again."',
        ),
        WritingTip(
            "Use the AIDA framework",
            "Attention, Interest, Desire, Action.",
        ),
        WritingTip(
            "Write multiple variations",
            "Draft 3-5 headlines and 2-3 body options for A/B testing.",
        ),
        WritingTip(
            "Make your CTA specific and urgent",
            "Say exactly what happens on click and why to act now.",
            'Weak: "Sign up today." Strong: "Start your free 14-day trial -- no credit card required."',
        ),
        WritingTip(
            "Respect the character limits",
            "Know the platform's limits before writing.",
        ),
        WritingTip(
            "Use social proof strategically",
            "Numbers, testimonials and recognizable names build credibility.",
        ),
    ),
}

MIN_TIPS = 3
MAX_TIPS = 5


def get_tips(content_type: str, rng: random.Random | None = None) -> list[WritingTip]:
    """Return 3 to 5 tips for a content type in random order.

    Args:
        content_type: Key into WRITING_TIPS (e.g. "blog").
        rng: Source of randomness. Pass a seeded ``random.Random`` for
            reproducible output; defaults to a fresh unseeded instance.

    Returns:
        A new list; empty for unknown content types.
    """
    tips = WRITING_TIPS.get(content_type)
    if not tips:
        return []

    rng = rng if rng is not None else random.Random()
    shuffled = list(tips)
    rng.shuffle(shuffled)

    count = min(len(shuffled), MIN_TIPS + rng.randrange(MAX_TIPS - MIN_TIPS + 1))
    return shuffled[:count]
