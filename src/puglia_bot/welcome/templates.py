"""Welcome message templates for the PugliaTechs group."""

from __future__ import annotations

NAME_SEPARATOR = ", "

_LINKS_IT = (
    "Alcuni link utili:\n"
    "• Manifesto: https://www.pugliatechs.com/manifesto\n"
    "• Eventi: https://lu.ma/pugliatechs\n"
    "• LinkedIn: https://www.linkedin.com/company/pugliatechs\n"
    "• Instagram: https://www.instagram.com/pugliatechs\n"
    "• YouTube: https://youtube.com/@pugliatechs\n\n"
)

_LINKS_EN = (
    "Some useful links:\n"
    "• Manifesto: https://www.pugliatechs.com/manifesto\n"
    "• Upcoming events: https://lu.ma/pugliatechs\n"
    "• LinkedIn: https://www.linkedin.com/company/pugliatechs\n"
    "• Instagram: https://www.instagram.com/pugliatechs\n"
    "• YouTube: https://youtube.com/@pugliatechs\n\n"
)

ITALIAN_TEMPLATE = (
    "Ciao {names}! Benvenutə nel gruppo PugliaTechs, il Global Tech Hub della Puglia. "
    "Condividiamo passione per business, innovazione e tecnologia.\n\n"
    + _LINKS_IT
    + "Siamo felici di averti con noi!\n"
    "Scrivi una breve introduzione su di te."
)

ENGLISH_TEMPLATE = (
    "Hello {names}! Welcome to the PugliaTechs group, the Global Tech Hub of Puglia "
    "where we share a passion for business, innovation, and tech.\n\n"
    + _LINKS_EN
    + "Glad to have you on board!\n"
    "Write a quick intro about yourself."
)

NEUTRAL_TEMPLATE = (
    "Ciao / Hello {names}! Benvenutə nel gruppo PugliaTechs! "
    "Welcome to the PugliaTechs group, the Global Tech Hub of Puglia.\n\n"
    + _LINKS_EN
    + "Scrivete una breve introduzione su di voi / Write a quick intro about yourselves."
)


def render(template: str, names: list[str]) -> str:
    return template.format(names=NAME_SEPARATOR.join(names))


__all__ = [
    "NAME_SEPARATOR",
    "ITALIAN_TEMPLATE",
    "ENGLISH_TEMPLATE",
    "NEUTRAL_TEMPLATE",
    "render",
]
