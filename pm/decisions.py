"""
Recommendation support: the boundary with the text-generation collaborator.

The engine does not write advice itself. It hands a structured context to a
RecommendationProvider and returns what comes back, unvalidated:

  generate_recommendations:         advice for an analysed project
  explain_financial_metrics:        plain-language reading of one scenario
  generate_missing_data_questions:  questions for an incomplete project form

When the provider fails, the failure is logged and fixed fallback text in
the requested language is returned, so a report can always be rendered.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from core.errors import InvalidInputError
from core.schema import ScenarioName
from data_prep.transform import PROJECT_FORM_FIELDS, missing_project_fields

from .formatting import format_months, format_percentage

if TYPE_CHECKING:
    from engine.runner import AnalysisBundle

    from .metrics import FinancialMetrics

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("en", "fr")

FALLBACK_RECOMMENDATIONS: Dict[str, List[str]] = {
    "en": [
        "Consider phasing the initial investment to reduce upfront risk.",
        "Negotiate fixed-price contracts for key services to minimize variable cost risk.",
        "Implement a tiered pricing strategy to improve profit margins.",
        "Focus on improving customer retention to reduce marketing costs.",
        "Explore partnerships to share fixed costs and expand revenue streams.",
    ],
    "fr": [
        "Envisagez d'échelonner l'investissement initial pour réduire le risque initial.",
        "Négociez des contrats à prix fixe pour les services clés afin de minimiser le risque de coûts variables.",
        "Mettez en œuvre une stratégie de prix à plusieurs niveaux pour améliorer les marges bénéficiaires.",
        "Concentrez-vous sur l'amélioration de la fidélisation des clients pour réduire les coûts de marketing.",
        "Explorez des partenariats pour partager les coûts fixes et développer les sources de revenus.",
    ],
}


MISSING_DATA_QUESTIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "name": "What is the name of your project or business?",
        "goal": "What are the main objectives of this project?",
        "industry": "In which industry or sector does this project operate?",
        "timeHorizon": "What is your expected timeframe for this project in months?",
        "initialInvestment": "What is the total initial investment required for this project?",
        "monthlyFixedCosts": "What are your estimated monthly fixed costs?",
        "variableCosts": "What percentage of your revenue goes to variable costs?",
        "expectedMonthlyRevenue": "What is your expected monthly revenue?",
    },
    "fr": {
        "name": "Quel est le nom de votre projet ou entreprise?",
        "goal": "Quels sont les principaux objectifs de ce projet?",
        "industry": "Dans quelle industrie ou secteur ce projet opère-t-il?",
        "timeHorizon": "Quel est le délai prévu pour ce projet en mois?",
        "initialInvestment": "Quel est l'investissement initial total requis pour ce projet?",
        "monthlyFixedCosts": "Quels sont vos coûts fixes mensuels estimés?",
        "variableCosts": "Quel pourcentage de vos revenus est consacré aux coûts variables?",
        "expectedMonthlyRevenue": "Quel est votre revenu mensuel prévu?",
    },
}

_EXPLANATION_TEMPLATES: Dict[str, str] = {
    "en": (
        "ROI ({roi}): Return on Investment - For every dollar invested, you'll earn back "
        "your investment plus {roi} more. A higher percentage is better, with anything "
        "above 15% generally considered good.\n\n"
        "Break-even point ({break_even}): The time it will take to recover your initial "
        "investment. Shorter periods are better, typically under 12 months is considered "
        "favorable.\n\n"
        "Profit margin ({margin}): The percentage of revenue that becomes profit. Industry "
        "averages vary, but generally 10-20% is healthy for most businesses.\n\n"
        "Risk level ({risk}): Based on your projections and industry benchmarks, this "
        "project has a {risk_lower} risk profile."
    ),
    "fr": (
        "ROI ({roi}): Retour sur investissement - Pour chaque euro investi, vous "
        "récupérerez votre investissement plus {roi} de plus. Un pourcentage plus élevé "
        "est préférable, tout ce qui dépasse 15 % étant généralement considéré comme bon.\n\n"
        "Point d'équilibre ({break_even}): Le temps qu'il faudra pour récupérer votre "
        "investissement initial. Des périodes plus courtes sont préférables, généralement "
        "moins de 12 mois est considéré comme favorable.\n\n"
        "Marge bénéficiaire ({margin}): Le pourcentage du revenu qui devient un bénéfice. "
        "Les moyennes de l'industrie varient, mais généralement 10-20% est sain pour la "
        "plupart des entreprises.\n\n"
        "Niveau de risque ({risk}): Selon vos projections et les références de "
        "l'industrie, ce projet a un profil de risque {risk_lower}."
    ),
}

_RISK_LABELS: Dict[str, Dict[str, str]] = {
    "en": {"Low": "Low", "Medium": "Medium", "High": "High"},
    "fr": {"Low": "Faible", "Medium": "Moyen", "High": "Élevé"},
}


def fallback_questions(missing: List[str], language: str = "en") -> List[str]:
    """One fixed question per missing field, in form order."""
    table = MISSING_DATA_QUESTIONS[language]
    return [table[key] for key in PROJECT_FORM_FIELDS if key in missing]


def fallback_explanation(metrics: Mapping[str, Any], language: str = "en") -> str:
    """Fixed explanation built from a FinancialMetrics.to_dict() mapping."""
    risk = _RISK_LABELS[language].get(metrics.get("riskLevel"), str(metrics.get("riskLevel")))
    return _EXPLANATION_TEMPLATES[language].format(
        roi=format_percentage(metrics.get("roi")),
        break_even=format_months(metrics.get("breakEven")),
        margin=format_percentage(metrics.get("profitMargin")),
        risk=risk,
        risk_lower=risk.lower(),
    )


class RecommendationProvider:
    """Interface for a text-recommendation service (LLM, rules engine, ...)."""

    def recommend(self, context: Dict[str, Any], language: str = "en") -> List[str]:
        raise NotImplementedError

    def explain(self, metrics: Dict[str, Any], language: str = "en") -> str:
        raise NotImplementedError

    def questions(self, context: Dict[str, Any], language: str = "en") -> List[str]:
        raise NotImplementedError


class StaticRecommendationProvider(RecommendationProvider):
    """Returns the fixed fallback text. Useful offline and in tests."""

    def recommend(self, context: Dict[str, Any], language: str = "en") -> List[str]:
        return list(FALLBACK_RECOMMENDATIONS[language])

    def explain(self, metrics: Dict[str, Any], language: str = "en") -> str:
        return fallback_explanation(metrics, language)

    def questions(self, context: Dict[str, Any], language: str = "en") -> List[str]:
        missing = [k for k, v in context["missingFields"].items() if v]
        return fallback_questions(missing, language)


def _check_language(language: str) -> None:
    if language not in SUPPORTED_LANGUAGES:
        raise InvalidInputError(
            f"Unsupported language {language!r}; expected one of {SUPPORTED_LANGUAGES}"
        )


def _finite_or_none(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def build_recommendation_context(bundle: "AnalysisBundle") -> Dict[str, Any]:
    """
    JSON-friendly context for the collaborator.

    Non-finite metric values become None so the context always serializes.
    A scenario that is absent (or disabled) is reported as None.
    """
    p = bundle.project

    def _metrics(name: ScenarioName) -> Optional[Dict[str, Any]]:
        result = bundle.get(name)
        if result is None:
            return None
        return {k: _finite_or_none(v) for k, v in result.metrics.to_dict().items()}

    return {
        "name": p.name,
        "goal": p.goal,
        "industry": p.industry,
        "timeHorizon": p.time_horizon_months,
        "initialInvestment": p.initial_investment,
        "monthlyFixedCosts": p.monthly_fixed_costs,
        "variableCosts": p.variable_cost_rate,
        "expectedMonthlyRevenue": p.expected_monthly_revenue,
        "realistic": _metrics(ScenarioName.REALISTIC),
        "optimistic": _metrics(ScenarioName.OPTIMISTIC),
        "pessimistic": _metrics(ScenarioName.PESSIMISTIC),
    }


def generate_recommendations(
    bundle: "AnalysisBundle",
    *,
    provider: Optional[RecommendationProvider] = None,
    language: str = "en",
) -> List[str]:
    """
    Ask the provider for recommendations about this bundle.

    Parameters
    ----------
    bundle : AnalysisBundle
        Output of engine.runner.run_analysis()
    provider : RecommendationProvider, optional
        Defaults to StaticRecommendationProvider
    language : str
        "en" or "fr"

    Returns
    -------
    List of recommendation strings. Provider errors fall back to
    FALLBACK_RECOMMENDATIONS[language]; a non-list answer gives [].
    """
    _check_language(language)
    provider = provider or StaticRecommendationProvider()
    context = build_recommendation_context(bundle)

    try:
        answer = provider.recommend(context, language)
    except Exception:
        logger.exception("Recommendation provider %s failed; using fallback list",
                         type(provider).__name__)
        return list(FALLBACK_RECOMMENDATIONS[language])

    if not isinstance(answer, list):
        logger.warning("Recommendation provider returned %s, expected a list",
                       type(answer).__name__)
        return []
    return [str(item) for item in answer]


def explain_financial_metrics(
    metrics: "FinancialMetrics",
    *,
    provider: Optional[RecommendationProvider] = None,
    language: str = "en",
) -> str:
    """
    Plain-language explanation of one scenario's metrics.

    The provider receives metrics.to_dict() with non-finite values as None.
    Provider errors fall back to the fixed explanation; a non-string answer
    gives "".
    """
    _check_language(language)
    provider = provider or StaticRecommendationProvider()
    payload = {k: _finite_or_none(v) for k, v in metrics.to_dict().items()}

    try:
        answer = provider.explain(payload, language)
    except Exception:
        logger.exception("Recommendation provider %s failed to explain metrics; using fallback",
                         type(provider).__name__)
        return fallback_explanation(payload, language)

    if not isinstance(answer, str):
        logger.warning("Recommendation provider returned %s, expected a string",
                       type(answer).__name__)
        return ""
    return answer


def generate_missing_data_questions(
    partial: Optional[Mapping[str, Any]],
    *,
    provider: Optional[RecommendationProvider] = None,
    language: str = "en",
) -> List[str]:
    """
    Questions that would complete a partial project payload.

    Parameters
    ----------
    partial : mapping
        Raw form / API payload with camelCase keys, before defaults are applied
    provider : RecommendationProvider, optional
        Defaults to StaticRecommendationProvider
    language : str
        "en" or "fr"

    Returns
    -------
    List of questions; [] when nothing is missing (the provider is not
    called). Provider errors fall back to one fixed question per missing
    field; a non-list answer gives [].
    """
    _check_language(language)
    missing = missing_project_fields(partial)
    if not missing:
        return []

    provider = provider or StaticRecommendationProvider()
    partial = partial or {}
    context = {
        "partialData": {k: partial[k] for k in PROJECT_FORM_FIELDS if k in partial},
        "missingFields": {k: k in missing for k in PROJECT_FORM_FIELDS},
    }

    try:
        answer = provider.questions(context, language)
    except Exception:
        logger.exception("Recommendation provider %s failed to ask for missing data; using fallback",
                         type(provider).__name__)
        return fallback_questions(missing, language)

    if not isinstance(answer, list):
        logger.warning("Recommendation provider returned %s, expected a list",
                       type(answer).__name__)
        return []
    return [str(item) for item in answer]
