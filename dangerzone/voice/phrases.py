# phrases.py
from __future__ import annotations

from typing import Dict, Iterable


LABELS_ES: Dict[str, str] = {
    "person": "persona",
    "bicycle": "bicicleta",
    "car": "auto",
    "motorcycle": "moto",
    "airplane": "avión",
    "bus": "autobús",
    "train": "tren",
    "truck": "camión",
    "boat": "barco",
    "traffic light": "semáforo",
    "fire hydrant": "grifo",
    "stop sign": "señal pare",
    "parking meter": "parquímetro",
    "bench": "banco",
    "bird": "pájaro",
    "cat": "gato",
    "dog": "perro",
    "horse": "caballo",
    "sheep": "oveja",
    "cow": "vaca",
    "elephant": "elefante",
    "bear": "oso",
    "zebra": "cebra",
    "giraffe": "jirafa",
    "backpack": "mochila",
    "umbrella": "paraguas",
    "handbag": "bolso",
    "tie": "corbata",
    "suitcase": "maleta",
    "skis": "esquís",
    "sports ball": "pelota",
    "kite": "cometa",
    "baseball bat": "bate",
    "baseball glove": "guante béisbol",
    "skateboard": "skate",
    "surfboard": "tabla surf",
    "tennis racket": "raqueta",
    "bottle": "botella",
    "wine glass": "copa",
    "cup": "taza",
    "fork": "tenedor",
    "knife": "cuchillo",
    "spoon": "cuchara",
    "bowl": "bol",
    "banana": "plátano",
    "apple": "manzana",
    "sandwich": "sándwich",
    "orange": "naranja",
    "broccoli": "brócoli",
    "carrot": "zanahoria",
    "hot dog": "completo",
    "donut": "dona",
    "cake": "pastel",
    "chair": "silla",
    "couch": "sofá",
    "potted plant": "planta",
    "bed": "cama",
    "dining table": "mesa",
    "toilet": "inodoro",
    "laptop": "portátil",
    "remote": "control remoto",
    "keyboard": "teclado",
    "cell phone": "celular",
    "microwave": "microondas",
    "oven": "horno",
    "toaster": "tostadora",
    "sink": "fregadero",
    "refrigerator": "refrigerador",
    "book": "libro",
    "clock": "reloj",
    "vase": "florero",
    "scissors": "tijeras",
    "teddy bear": "oso peluche",
    "hair drier": "secador",
    "toothbrush": "cepillo dientes",
}

MESSAGES_ES: Dict[str, str] = {
    "danger detected": "PELIGRO DETECTADO",
    "danger imminent": "PELIGRO PRÓXIMO",
    "caution": "PRECAUCIÓN",
    "safe zone": "ZONA SEGURA",
    "danger": "PELIGRO",
    "detected": "DETECTADO",
    "scanning": "Escaneando...",
    "alert": "¡Alerta! Persona en zona de peligro.",
}

MESSAGES_EN: Dict[str, str] = {
    "danger": "DANGER",
    "detected": "DETECTED",
    "scanning": "Scanning...",
    "alert": "Alert! Person in danger zone.",
}

_LABELS: Dict[str, Dict[str, str]] = {"es": LABELS_ES}
_MESSAGES: Dict[str, Dict[str, str]] = {"es": MESSAGES_ES, "en": MESSAGES_EN}


def translate(label: str, language: str) -> str:
    """COCO label in ``language``; unknown labels pass through unchanged."""
    return _LABELS.get(language, {}).get(label, label)


def message(key: str, language: str) -> str:
    table = _MESSAGES.get(language, MESSAGES_EN)
    return table.get(key, MESSAGES_EN.get(key, key.upper()))


def alert_phrase(language: str) -> str:
    return message("alert", language)


def object_list(labels: Iterable[str], language: str) -> str:
    return ", ".join(translate(label, language) for label in labels)
