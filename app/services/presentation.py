# app/services/presentation.py
"""Helpers puros para la vista pública y aplicación de efectos sobre el <head>."""
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union
from urllib.parse import quote

from app.services.reconstruction import LOAD_FONT, SET_FAVICON, SET_META, SET_TITLE, SideEffect

WHATSAPP_COUNTRY_CODE = "51"
WHATSAPP_GREETING = "Hola, estoy interesado en sus servicios"

Coordinate = Union[str, int, float]


def get_initials(name: Optional[str]) -> str:
    if not name or not name.strip():
        return "U"
    words = name.split()
    if len(words) >= 2:
        return (words[0][0] + words[1][0]).upper()
    return name.strip()[0].upper()


def normalize_phone(phone: str) -> str:
    digits = re.sub(r"\D", "", phone or "")
    if digits.startswith(WHATSAPP_COUNTRY_CODE):
        return digits
    return WHATSAPP_COUNTRY_CODE + digits


def whatsapp_link(phone: str, text: str = WHATSAPP_GREETING) -> str:
    return f"https://wa.me/{normalize_phone(phone)}?text={quote(text)}"


def contact_message_link(phone: str, nombre: str, email: str, mensaje: str) -> str:
    """Enlace de WhatsApp con el mensaje del formulario de contacto."""
    text = f"Hola, mi nombre es {nombre}. {mensaje}. Mi email es: {email}"
    return whatsapp_link(phone, text)


def map_embed_url(lat: Coordinate, lng: Coordinate) -> str:
    return f"https://maps.google.com/maps?q={lat},{lng}&t=&z=15&ie=UTF8&iwloc=&output=embed"


def google_maps_link(lat: Coordinate, lng: Coordinate) -> str:
    return f"https://www.google.com/maps?q={lat},{lng}"


@dataclass
class PageHead:
    """Modelo en memoria del <head> de la página pública."""
    title: str = ""
    links: List[Dict[str, str]] = field(default_factory=list)
    metas: Dict[str, str] = field(default_factory=dict)

    def find_link(self, rel_contains: str = None, href: str = None) -> Optional[Dict[str, str]]:
        for link in self.links:
            if rel_contains and rel_contains in link.get("rel", ""):
                return link
            if href and link.get("href") == href:
                return link
        return None

    @property
    def loaded_fonts(self) -> List[str]:
        return [link["family"] for link in self.links if link.get("family")]


def apply_side_effects(head: PageHead, effects: Iterable[SideEffect]) -> PageHead:
    for effect in effects:
        payload = effect.payload
        if effect.kind == SET_TITLE:
            head.title = payload["title"]
        elif effect.kind == SET_FAVICON:
            link = head.find_link(rel_contains="icon")
            if link is None:
                link = {"rel": payload["rel"]}
                head.links.append(link)
            link["type"] = payload["type"]
            link["href"] = payload["href"]
        elif effect.kind == SET_META:
            head.metas[payload["name"]] = payload["content"]
        elif effect.kind == LOAD_FONT:
            if head.find_link(href=payload["href"]) is None:
                head.links.append(dict(payload))
        else:
            raise ValueError(f"Efecto desconocido: {effect.kind}")
    return head
