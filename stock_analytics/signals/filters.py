"""Pure filters over an AnalysisResult's signals"""

from typing import Union

from ..models.indicators import IndicatorKind
from ..models.signals import AnalysisResult, TechnicalSignal


def get_strong_signals(result: AnalysisResult, min_strength: float = 0.7) -> list[TechnicalSignal]:
    """Signals with strength >= ``min_strength``, in original order."""
    return [signal for signal in result.signals if signal.strength >= min_strength]


def get_signals_by_indicator(
    result: AnalysisResult, indicator: Union[IndicatorKind, str]
) -> list[TechnicalSignal]:
    """Signals produced by ``indicator`` (kind or display name)."""
    name = indicator.value if isinstance(indicator, IndicatorKind) else indicator
    return [signal for signal in result.signals if signal.indicator == name]


def get_consensus_signals(result: AnalysisResult, min_consensus: int = 2) -> list[TechnicalSignal]:
    """
    Combine signals that agree on direction at the same timestamp

    Each group of at least ``min_consensus`` agreeing signals yields one
    combined signal with the group's mean strength, in order of each group's
    first member.
    """
    groups: dict[tuple, list[TechnicalSignal]] = {}
    for signal in result.signals:
        groups.setdefault((signal.signal, signal.timestamp), []).append(signal)

    consensus = []
    for members in groups.values():
        if len(members) < min_consensus:
            continue
        first = members[0]
        consensus.append(TechnicalSignal(
            indicator=f"Consensus ({', '.join(s.indicator for s in members)})",
            signal=first.signal,
            strength=sum(s.strength for s in members) / len(members),
            value=first.value,
            timestamp=first.timestamp,
            description=f"Multiple indicators agree: {first.description}",
        ))
    return consensus
