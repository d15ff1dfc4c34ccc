# neowatts/content.py
# Contenido informativo estático: fuentes de energía, beneficios, comparativa.

from enum import Enum


class EnergyCost(str, Enum):
    LOW = "Bajo"
    MEDIUM = "Medio"
    HIGH = "Alto"


HERO = {
    "title": "Transición Energética Justa",
    "subtitle": "Hacia un futuro sostenible con energías limpias",
    "body": (
        "Colombia avanza hacia un modelo energético más limpio, equitativo y sostenible. "
        "Descubre cómo las energías renovables están transformando nuestro país y "
        "contribuyendo a un futuro más verde para todos."
    ),
}

SOLAR_POTENTIAL = {
    "irradiance_kwh_m2_day": 4.5,
    "installed_gw": 18.7,
    "text": (
        "Colombia cuenta con condiciones excepcionales para el desarrollo de energía solar, "
        "especialmente en las regiones de La Guajira, Atlántico y Cesar, donde la radiación "
        "solar supera los 6 kWh/m²/día."
    ),
}

SOLAR_BENEFITS = [
    "Reducción de emisiones de CO₂ hasta en un 80%",
    "Creación de empleos verdes en zonas rurales",
    "Acceso a energía limpia en comunidades remotas",
    "Reducción de costos energéticos a largo plazo",
]

BENEFITS = [
    {"title": "Energía Limpia", "description": "No produce emisiones de CO2 durante su operación", "icon": "🌱"},
    {"title": "Renovable", "description": "Fuente inagotable de energía del sol", "icon": "♻️"},
    {"title": "Bajo Mantenimiento", "description": "Costos operativos mínimos una vez instalada", "icon": "🔧"},
    {"title": "Escalable", "description": "Desde instalaciones residenciales hasta plantas industriales", "icon": "📈"},
]

COMPARISONS = [
    {"source": "Solar", "efficiency": "20-22%", "cost": EnergyCost.LOW, "emissions": "0 kg CO2/MWh"},
    {"source": "Eólica", "efficiency": "35-45%", "cost": EnergyCost.LOW, "emissions": "11 kg CO2/MWh"},
    {"source": "Hidráulica", "efficiency": "80-90%", "cost": EnergyCost.MEDIUM, "emissions": "24 kg CO2/MWh"},
    {"source": "Geotérmica", "efficiency": "10-20%", "cost": EnergyCost.MEDIUM, "emissions": "5 kg CO2/MWh"},
    {"source": "Biomasa", "efficiency": "20-25%", "cost": EnergyCost.HIGH, "emissions": "120 kg CO2/MWh"},
]

ENERGY_BANNERS = [
    {
        "key": "solar",
        "title": "Energía Solar",
        "description": "La fuente de energía más abundante del planeta",
        "icon": "☀️",
        "details": [
            "El Sol proporciona 10,000 veces más energía de la que consume la humanidad",
            "Crecimiento anual del 20% en capacidad instalada",
            "Presente en más de 100 países",
            "Reducción de costos del 90% en la última década",
        ],
        "main_description": (
            "La energía solar es la energía obtenida mediante la captación de la luz y el calor "
            "emitidos por el Sol. Esta energía se puede aprovechar mediante tecnologías como "
            "paneles fotovoltaicos y colectores solares térmicos."
        ),
    },
    {
        "key": "wind",
        "title": "Energía Eólica",
        "description": "Aprovechando el poder del viento para un futuro limpio",
        "icon": "🌬️",
        "details": [
            "Una de las fuentes de energía renovable de más rápido crecimiento",
            "Reduce significativamente las emisiones de gases de efecto invernadero",
            "Las turbinas modernas son cada vez más eficientes y silenciosas",
            "Ideal para zonas costeras y llanuras con vientos constantes",
        ],
        "main_description": (
            "La energía eólica se genera a partir de la fuerza del viento, que mueve las palas de "
            "los aerogeneradores para producir electricidad. Es una fuente de energía limpia y "
            "sostenible, con un impacto ambiental mínimo."
        ),
    },
    {
        "key": "hydro",
        "title": "Energía Hidroeléctrica",
        "description": "El poder del agua en movimiento para generar electricidad",
        "icon": "💧",
        "details": [
            "Fuente de energía renovable más utilizada a nivel mundial",
            "Proporciona una generación de energía constante y predecible",
            "Contribuye al control de inundaciones y suministro de agua",
            "Grandes proyectos pueden tener impactos ambientales y sociales",
        ],
        "main_description": (
            "La energía hidroeléctrica utiliza la fuerza del agua que cae o fluye para hacer girar "
            "turbinas conectadas a generadores. Es una fuente de energía renovable madura y "
            "confiable, fundamental en el mix energético de muchos países."
        ),
    },
    {
        "key": "geothermal",
        "title": "Energía Geotérmica",
        "description": "Calor de la Tierra para energía sostenible",
        "icon": "🌋",
        "details": [
            "Aprovecha el calor interno de la Tierra",
            "Fuente de energía base, disponible 24/7",
            "Bajas emisiones de carbono durante la operación",
            "Requiere ubicaciones geográficas específicas con actividad geotérmica",
        ],
        "main_description": (
            "La energía geotérmica es el calor que se genera y almacena en el interior de la Tierra. "
            "Se utiliza para generar electricidad o para calefacción y refrigeración directa, siendo "
            "una fuente de energía constante e independiente de las condiciones climáticas."
        ),
    },
    {
        "key": "biofuel",
        "title": "Bioenergía",
        "description": "Energía de la biomasa para un futuro más verde",
        "icon": "🌿",
        "details": [
            "Producida a partir de materia orgánica (biomasa)",
            "Puede ser utilizada para electricidad, calor o combustibles líquidos",
            "Contribuye a la gestión de residuos y reducción de la dependencia de fósiles",
            "La sostenibilidad depende de las prácticas de cultivo y recolección",
        ],
        "main_description": (
            "La bioenergía se obtiene de la biomasa, que incluye residuos agrícolas, forestales, "
            "cultivos energéticos y desechos orgánicos. Se puede convertir en electricidad, calor o "
            "biocombustibles, ofreciendo una alternativa renovable a los combustibles fósiles."
        ),
    },
]

DATA_SOURCES = [
    "Our World in Data (energía renovable por país)",
    "Ministerio de Minas y Energía",
    "UPME - Unidad de Planeación",
    "XM - Operador del Sistema",
]


def next_banner_index(index: int, count: int) -> int:
    return (index + 1) % count


def previous_banner_index(index: int, count: int) -> int:
    return (index - 1 + count) % count
