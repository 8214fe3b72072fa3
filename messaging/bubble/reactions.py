"""Reaction aggregation for display."""

from dataclasses import dataclass, field

from ..models import Reaction


@dataclass
class ReactionSummary:
    """One distinct emoji on a message with its count badge."""

    emoji: str
    count: int
    reaction_ids: list[str] = field(default_factory=list)
    user_ids: list[str] = field(default_factory=list)


def aggregate_reactions(reactions: list[Reaction]) -> list[ReactionSummary]:
    """Group reactions by emoji, in the order each emoji first appears."""
    groups: dict[str, ReactionSummary] = {}
    for reaction in reactions:
        summary = groups.get(reaction.emoji)
        if summary is None:
            summary = ReactionSummary(emoji=reaction.emoji, count=0)
            groups[reaction.emoji] = summary
        summary.count += 1
        summary.reaction_ids.append(reaction.id)
        summary.user_ids.append(reaction.user_id)
    return list(groups.values())
