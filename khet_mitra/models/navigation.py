from typing import List

from pydantic import BaseModel


class MenuItem(BaseModel):
    href: str
    label: str
    active: bool = False


class QuickAction(BaseModel):
    href: str
    title: str


class FeatureCard(BaseModel):
    href: str
    title: str
    description: str
    cta: str


class Dashboard(BaseModel):
    welcome: str
    welcome_description: str
    quick_actions: List[QuickAction]
    main_features: List[FeatureCard]
