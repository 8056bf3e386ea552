from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

import websockets
from websockets.asyncio.server import ServerConnection

from handrank.cards import parse_label
from handrank.evaluator import InvalidCardCount, detect_hand, evaluate_best_hand, showdown
from handrank.models import showdown_payload

LOGGER = logging.getLogger("showdown_host")

# HostServer exposes the hand evaluator to display clients over WebSocket.
# Every network concern lives here; handrank stays pure.


@dataclass
class HostConfig:
    host: str = "0.0.0.0"
    port: int = 8766


class RequestError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


class HostServer:
    def __init__(self, config: Optional[HostConfig] = None) -> None:
        self.config = config or HostConfig()
        self.requests_served = 0

    async def start(self) -> None:
        # websockets.serve keeps accepting clients until the process stops.
        async with websockets.serve(self._handle_connection, self.config.host, self.config.port):
            LOGGER.info("Showdown host listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Display client connected")
        try:
            async for raw in websocket:
                await self._handle_message(websocket, self._decode(raw))
        except websockets.ConnectionClosed:
            pass
        LOGGER.info("Display client disconnected")

    async def _handle_message(self, websocket: ServerConnection, message: Dict[str, object]) -> None:
        msg_type = message.get("type")
        request_id = message.get("req_id")
        try:
            if msg_type == "evaluate":
                reply_type, payload = "hand", self._evaluate(message)
            elif msg_type == "detect":
                reply_type, payload = "quick_hand", self._detect(message)
            elif msg_type == "showdown":
                reply_type, payload = "showdown", self._showdown(message)
            else:
                raise RequestError("UNKNOWN_TYPE", "Unsupported message type")
        except InvalidCardCount as exc:
            LOGGER.warning("Rejected %s request: %s", msg_type, exc)
            await self._send_error(websocket, code="INVALID_CARD_COUNT", msg=str(exc), request_id=request_id)
            return
        except RequestError as exc:
            LOGGER.warning("Rejected %s request: %s (%s)", msg_type, exc.msg, exc.code)
            await self._send_error(websocket, code=exc.code, msg=exc.msg, request_id=request_id)
            return

        self.requests_served += 1
        if request_id is not None:
            payload["req_id"] = request_id
        await self._send_json(websocket, reply_type, payload)

    def _evaluate(self, message: Dict[str, object]) -> Dict[str, object]:
        cards = self._cards(message, "cards")
        hand = evaluate_best_hand(cards)
        LOGGER.debug("Evaluated %s -> %s", cards, hand.description)
        return hand.to_payload()

    def _detect(self, message: Dict[str, object]) -> Dict[str, object]:
        hole = self._cards(message, "hole")
        community = self._cards(message, "community", required=False)
        hand = detect_hand(hole, community)
        return {"hand": hand.to_payload() if hand else None}

    def _showdown(self, message: Dict[str, object]) -> Dict[str, object]:
        community = self._cards(message, "community")
        players = message.get("players")
        if not isinstance(players, dict) or not players:
            raise RequestError("BAD_SCHEMA", "players must map ids to hole cards")
        hands = {str(player): self._card_list(hole, f"players.{player}") for player, hole in players.items()}
        winner = message.get("winner")
        if winner is not None and not isinstance(winner, str):
            raise RequestError("BAD_SCHEMA", "winner must be a string")
        entries = showdown(community, hands, winner=winner)
        return showdown_payload(entries, winner)

    def _cards(self, message: Dict[str, object], field_name: str, required: bool = True) -> List[int]:
        value = message.get(field_name)
        if value is None and not required:
            return []
        return self._card_list(value, field_name)

    def _card_list(self, value: object, field_name: str) -> List[int]:
        if not isinstance(value, list):
            raise RequestError("BAD_SCHEMA", f"{field_name} must be a list of cards")
        cards: List[int] = []
        for item in value:
            if isinstance(item, bool):
                raise RequestError("BAD_CARD", f"Invalid card in {field_name}: {item!r}")
            if isinstance(item, int):
                if not 0 <= item <= 51:
                    raise RequestError("BAD_CARD", f"Card code out of range: {item}")
                cards.append(item)
            elif isinstance(item, str):
                try:
                    cards.append(parse_label(item))
                except ValueError as exc:
                    raise RequestError("BAD_CARD", str(exc)) from exc
            else:
                raise RequestError("BAD_CARD", f"Invalid card in {field_name}: {item!r}")
        return cards

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    async def _send_error(
        self,
        websocket: ServerConnection,
        code: str,
        msg: str,
        request_id: Optional[object] = None,
    ) -> None:
        payload: Dict[str, object] = {"code": code, "msg": msg}
        if request_id is not None:
            payload["req_id"] = request_id
        await self._send_json(websocket, "error", payload)

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body, ensure_ascii=False)

    def _decode(self, raw: str) -> Dict[str, object]:
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return message if isinstance(message, dict) else {}
