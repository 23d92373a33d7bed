# tripplanner/queries.py
from .models import Intent

REGION_QUALIFIER = "India"

_SUBREGION_TERMS = {
    Intent.ATTRACTIONS: "tourist attractions landmarks monuments temples",
    Intent.GENERAL: "cityscape architecture street life culture",
}

_DEFAULT_TERMS = {
    Intent.ATTRACTIONS: "tourist attractions landmarks monuments city",
    Intent.GENERAL: "cityscape architecture street life culture city",
}


def build_photo_query(destination: str, intent: Intent, is_subregion: bool) -> str:
    """
    Compose the photo-provider search string.

    Sub-national regions get the quoted country qualifier so the image search
    does not drift to unrelated places with the same name. No URL escaping
    happens here; the transport encodes query parameters.
    """
    intent = Intent(intent)
    if is_subregion:
        return f'"{destination}" "{REGION_QUALIFIER}" {_SUBREGION_TERMS[intent]}'
    return f'"{destination}" {_DEFAULT_TERMS[intent]}'
