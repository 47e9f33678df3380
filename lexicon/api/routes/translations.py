"""Translation API endpoints.

Exposes the active provider's context: read/switch the locale and
translate keys.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from lexicon.api.models import LocaleModel, TranslateRequest, TranslateResponse
from lexicon.provider import MissingTranslationError, TranslationProvider

router = APIRouter()


def get_provider(request: Request) -> TranslationProvider:
    """Provider attached to the app by create_app()."""
    return request.app.state.translation_provider


def _translate(
    provider: TranslationProvider,
    key: str,
    data: dict | None,
    locale: str | None,
) -> TranslateResponse:
    locale = locale or provider.locale
    try:
        translate = provider.translator_for(locale)
    except MissingTranslationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return TranslateResponse(key=key, locale=locale, value=translate(key, data))


@router.get("/locale", response_model=LocaleModel)
def get_locale(provider: TranslationProvider = Depends(get_provider)):
    """Get the active locale."""
    return LocaleModel(locale=provider.locale)


@router.put("/locale", response_model=LocaleModel)
def set_locale(update: LocaleModel, provider: TranslationProvider = Depends(get_provider)):
    """Switch the active locale."""
    try:
        provider.set_locale(update.locale)
    except MissingTranslationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return LocaleModel(locale=provider.locale)


@router.get("/translate", response_model=TranslateResponse)
def translate_key(
    key: str = Query(..., min_length=1),
    locale: str | None = Query(None),
    provider: TranslationProvider = Depends(get_provider),
):
    """Translate a key without data."""
    return _translate(provider, key, None, locale)


@router.post("/translate", response_model=TranslateResponse)
def translate_with_data(
    request: TranslateRequest,
    provider: TranslationProvider = Depends(get_provider),
):
    """Translate a key with placeholder data and an optional count."""
    return _translate(provider, request.key, request.data, request.locale)
