"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "좌표 변환기",
        "en": "SkyFrames",
    },
    "intro": {
        "ko": "한 줄만 입력하세요. 12h 34m 56.7s, 12 34 56.7, +188.5° 처럼 자유롭게 적어도 됩니다.",
        "en": "Fill in exactly one row. Free-form input works: 12h 34m 56.7s, 12 34 56.7, +188.5°.",
    },
    "label_ra": {
        "ko": "적경",
        "en": "RA",
    },
    "label_dec": {
        "ko": "적위",
        "en": "Dec",
    },
    "label_l": {
        "ko": "경도 l",
        "en": "Longitude l",
    },
    "label_b": {
        "ko": "위도 b",
        "en": "Latitude b",
    },
    "label_user_year": {
        "ko": "사용자 분점 연도",
        "en": "User equinox year",
    },
    "label_current_year": {
        "ko": "현재 분점 연도",
        "en": "Current equinox year",
    },
    "btn_convert": {
        "ko": "✦ 변환하기",
        "en": "✦ Convert",
    },
    "btn_clear": {
        "ko": "모두 지우기",
        "en": "Clear all",
    },
    "frame_j2000": {
        "ko": "J2000",
        "en": "J2000",
    },
    "frame_b1950": {
        "ko": "B1950",
        "en": "B1950",
    },
    "frame_user_epoch": {
        "ko": "사용자 분점 {epoch}",
        "en": "User equinox {epoch}",
    },
    "frame_current_epoch": {
        "ko": "현재 분점 {epoch}",
        "en": "Current equinox {epoch}",
    },
    "frame_galactic": {
        "ko": "은하 좌표 (신)",
        "en": "Galactic (new)",
    },
    "frame_old_galactic": {
        "ko": "은하 좌표 (구, 근사식 // 행렬)",
        "en": "Galactic (old, approximate // matrix)",
    },
    "label_old_galactic": {
        "ko": "은하 좌표 (구)",
        "en": "Galactic (old)",
    },
    "error_input_count": {
        "ko": "정확히 한 줄만 입력해야 합니다",
        "en": "Need exactly one input row",
    },
    "error_user_year_range": {
        "ko": "사용자 분점 연도가 범위를 벗어났습니다",
        "en": "User-supplied year out of range",
    },
    "error_current_year_range": {
        "ko": "현재 분점 연도가 범위를 벗어났습니다",
        "en": "'Current' year out of range",
    },
    "error_user_year_missing": {
        "ko": "사용자 분점으로 입력하려면 연도가 필요합니다",
        "en": "For user-supplied equinox, must supply the year",
    },
    "error_current_year_missing": {
        "ko": "현재 분점 연도 값이 필요합니다",
        "en": "Need 'current year' value",
    },
    "error_coordinate_range": {
        "ko": "{frame} {axis} 값이 범위를 벗어났습니다",
        "en": "{frame} {axis} out of range",
    },
    "name_j2000": {
        "ko": "J2000",
        "en": "J2000",
    },
    "name_b1950": {
        "ko": "B1950",
        "en": "B1950",
    },
    "name_new_galactic": {
        "ko": "신 은하 좌표",
        "en": "New Galactic",
    },
    "name_old_galactic": {
        "ko": "구 은하 좌표",
        "en": "Old Galactic",
    },
    "name_user_year": {
        "ko": "사용자 분점",
        "en": "User Year",
    },
    "name_current_year": {
        "ko": "현재 분점",
        "en": "Current Year",
    },
    "axis_ra": {
        "ko": "적경",
        "en": "RA",
    },
    "axis_dec": {
        "ko": "적위",
        "en": "Dec",
    },
    "axis_longitude": {
        "ko": "경도",
        "en": "Longitude",
    },
    "axis_latitude": {
        "ko": "위도",
        "en": "Latitude",
    },
    "precision_note": {
        "ko": "왕복 변환 오차: {arcsec}\"",
        "en": "Round-trip precision: {arcsec}\"",
    },
    "map_title": {
        "ko": "J2000 적도 좌표",
        "en": "J2000 equatorial",
    },
}


def t(key: str, lang: str, **fields: object) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found. Keyword
    arguments fill ``{placeholders}`` in the string; a field value that is
    itself a key (``"axis_ra"``) is translated first.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    if not fields:
        return text
    values = {
        name: t(value, lang) if isinstance(value, str) and value in _STRINGS else value
        for name, value in fields.items()
    }
    return text.format(**values)


def frame_label(frame: str, epoch: float | None, lang: str) -> str:
    """Label of a result row, with the equinox year for epoch rows."""
    return t(frame, lang, epoch=f"{epoch:g}" if epoch is not None else "").strip()
