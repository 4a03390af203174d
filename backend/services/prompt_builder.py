"""System prompt for the career assistant, built from the user's gap analysis."""

from collections.abc import Sequence

from models.schemas.assistant_context import AssistantContext
from models.schemas.skill import SkillDefinition

ASSISTANT_INSTRUCTIONS = """YOUR RESPONSIBILITIES:
1. Provide personalized course recommendations based on the user's gap analysis
2. Suggest specific learning paths and upskilling strategies
3. Guide users around the CareerPath Gap Analyzer program features
4. Answer questions about tech roles, skills, and career paths
5. Be encouraging and supportive, especially for students and career switchers
6. Recommend free resources when possible (the app focuses on free learning resources)
7. Help users understand their readiness percentage and what they need to improve
8. Provide actionable advice on how to learn missing skills

GUIDELINES:
- Be conversational and friendly
- Use the user's name when appropriate
- Reference their specific skills and target role
- Provide concrete, actionable advice
- Suggest specific courses, tutorials, or learning resources
- Break down complex topics into manageable steps
- Encourage the user and celebrate their progress
- If the user hasn't selected a role yet, help them choose one
- If the user has low readiness, provide encouragement and a clear path forward
- Always mention free resources when possible

Keep responses concise but helpful. Aim for 2-4 paragraphs unless the user asks for more detail."""


def _labels(skill_ids: Sequence[str], vocabulary: Sequence[SkillDefinition] | None) -> list[str]:
    """Render skill ids as display labels when a vocabulary is available."""
    if not vocabulary:
        return list(skill_ids)
    by_id = {s.id: s.display_label for s in vocabulary}
    return [by_id.get(skill_id, skill_id) for skill_id in skill_ids]


def build_assistant_prompt(
    context: AssistantContext,
    vocabulary: Sequence[SkillDefinition] | None = None,
) -> str:
    """Format the assistant's system prompt for one user."""
    lines = [
        "You are CareerPath AI, a helpful and friendly career guidance assistant for the "
        "CareerPath Gap Analyzer application. Your role is to help students and career "
        "switchers navigate their path to entry-level tech roles by providing personalized "
        "course recommendations, upskilling advice, and guidance.",
        "",
        "CONTEXT ABOUT THE USER:",
    ]
    profile = [
        ("Name", context.name),
        ("School", context.school),
        ("Graduation Year", context.graduation_year),
        ("Experience Level", context.experience_level),
        ("Dream Role", context.dream_role),
    ]
    lines += [f"- {label}: {value}" for label, value in profile if value]

    lines += ["", "CURRENT SKILLS:"]
    if context.user_skills:
        lines.append(f"- {', '.join(_labels(context.user_skills, vocabulary))}")
    else:
        lines.append("- No skills added yet")

    if context.role:
        lines += ["", f"TARGET ROLE: {context.role.name}", f"- Description: {context.role.description}"]

        gap = context.gap_analysis
        if gap:
            matched = _labels(gap.matched_skills, vocabulary)
            missing = _labels(gap.missing_skills, vocabulary)
            lines += [
                "",
                "GAP ANALYSIS:",
                f"- Readiness: {gap.readiness_percent}%",
                f"- Weighted Readiness: {gap.weighted_readiness_percent}% (weighted by skill importance)",
                f"- Skills you have: {', '.join(matched) if matched else 'None'}",
                f"- Skills you need: {', '.join(missing) if missing else 'None'}",
            ]

    lines += ["", ASSISTANT_INSTRUCTIONS]
    return "\n".join(lines)
