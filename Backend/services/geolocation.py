# services/geolocation.py

from streamlit_js_eval import get_geolocation

LOCATING = "Locating…"


class GeolocationError(RuntimeError):
    pass


def format_position(lat: float, lng: float) -> str:
    return f"{lat:.4f}, {lng:.4f}"


def request_position(attempt: int):
    """
    One-shot browser Geolocation request. Returns None until the browser has
    answered; a new `attempt` number asks again.
    """
    return get_geolocation(component_key=f"geolocation_{attempt}")


def position_text(answer) -> str:
    """
    "lat, lng" with 4 decimals from the browser answer, shaped like
    {"coords": {"latitude": .., "longitude": ..}} or {"error": {"message": ..}}.
    """
    if not isinstance(answer, dict):
        raise GeolocationError(f"Could not retrieve location: unexpected answer {answer!r}")
    error = answer.get("error")
    if error:
        reason = error.get("message") if isinstance(error, dict) else error
        raise GeolocationError(f"Could not retrieve location: {reason}")
    try:
        coords = answer["coords"]
        lat = float(coords["latitude"])
        lng = float(coords["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeolocationError(f"Could not retrieve location: {e}") from e
    return format_position(lat, lng)
