"""
Client HTTP de base pour les fournisseurs distants.

Encapsule un httpx.AsyncClient a configuration immuable (URL de base,
en-tetes, timeout). Les redirections sont suivies; toute reponse finale
non-2xx ou tout echec de transport devient une ProviderError.
Aucune relance automatique.

Usage:
    client = ProviderClient(
        base_url="https://api.themoviedb.org/3",
        headers={"Accept": "application/json"},
        timeout=10.0,
    )
    data = await client.get_json("/movie/27205")
    await client.close()
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

import httpx
from loguru import logger

from src.core.errors import ProviderError


def _response_body(response: httpx.Response) -> Any:
    """Corps de la reponse, decode en JSON si possible."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ProviderClient:
    """
    Client HTTP GET vers un fournisseur a URL de base fixe.

    Le client httpx est cree paresseusement au premier appel et recree
    s'il a ete ferme.

    Attributes:
        base_url: URL de base du fournisseur
        headers: En-tetes envoyes sur chaque requete (lecture seule)
        params: Parametres de requete envoyes sur chaque requete (lecture seule)
        timeout: Timeout par defaut en secondes
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, str]] = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url
        self._headers = MappingProxyType(dict(headers or {}))
        self._params = MappingProxyType(dict(params or {}))
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure pour le fournisseur
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=dict(self._headers),
                params=dict(self._params),
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def _get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        Execute un GET et convertit les erreurs en ProviderError.

        Raises:
            ProviderError: Reponse non-2xx (avec status et corps) ou echec de transport
        """
        client = self._get_client()
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = dict(params)
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await client.get(url, **kwargs)
        except httpx.HTTPError as e:
            logger.debug(f"Echec de transport GET {url}: {e!r}")
            raise ProviderError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            body = _response_body(response)
            logger.debug(f"GET {url} -> {response.status_code}")
            raise ProviderError(
                f"GET {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        return response

    async def get_json(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        GET JSON relatif a l'URL de base.

        Args:
            path: Chemin de l'endpoint (ex: "/movie/27205")
            params: Parametres de requete supplementaires

        Returns:
            Corps JSON decode

        Raises:
            ProviderError: Echec HTTP ou corps non JSON
        """
        response = await self._get(path, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"GET {path} returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from e

    async def get_bytes(self, url: str, timeout: Optional[float] = None) -> bytes:
        """
        GET binaire (URL absolue ou relative) avec timeout optionnel.

        Returns:
            Corps brut de la reponse
        """
        response = await self._get(url, timeout=timeout)
        return response.content

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
