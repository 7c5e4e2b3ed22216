from typing import List, Optional

from khet_mitra.models.navigation import Dashboard, FeatureCard, MenuItem, QuickAction
from khet_mitra.services.localization import Translator

MENU_ITEMS = [
    ("/dashboard", "dashboard"),
    ("/disease-identification", "diseaseId"),
    ("/soil-analysis", "soilAnalysis"),
    ("/fertilizer-recommendation", "fertilizerAdvice"),
    ("/location-guidance", "locationGuidance"),
    ("/marketplace", "marketplace"),
    ("/my-poll", "myPoll"),
]

QUICK_ACTIONS = [
    ("/disease-identification", "newScan"),
    ("/soil-analysis", "soilTest"),
    ("/fertilizer-recommendation", "fertilizer"),
    ("/marketplace", "marketTrends"),
]

MAIN_FEATURES = [
    ("/disease-identification", "identifyCropDisease"),
    ("/location-guidance", "locationBasedGuidance"),
    ("/marketplace", "fairPriceMarketplace"),
    ("/my-poll", "myPollSensor"),
]


def build_menu(language: str, path: Optional[str] = None) -> List[MenuItem]:
    t = Translator(language, "sidebar")
    return [
        MenuItem(href=href, label=t(key), active=href == path)
        for href, key in MENU_ITEMS
    ]


def build_dashboard(language: str, name: str = "") -> Dashboard:
    t = Translator(language, "dashboard")
    return Dashboard(
        welcome=t("welcome", name=name),
        welcome_description=t("welcomeDescription"),
        quick_actions=[
            QuickAction(href=href, title=t(f"quickActions.{key}"))
            for href, key in QUICK_ACTIONS
        ],
        main_features=[
            FeatureCard(
                href=href,
                title=t(f"mainFeatures.{key}.title"),
                description=t(f"mainFeatures.{key}.description"),
                cta=t(f"mainFeatures.{key}.cta"),
            )
            for href, key in MAIN_FEATURES
        ],
    )
