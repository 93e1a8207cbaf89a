from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from typing import Literal, Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dispatch import Direction
from simulation import Building, Simulation, SimulationConfig, Ticker

logger = logging.getLogger(__name__)


class DispatcherSelection(BaseModel):
    name: str


class ServiceRequest(BaseModel):
    floor: int
    direction: Literal["up", "down"]


class SimulationManager:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()
        self.simulation = Simulation(Building(self.config))
        self.ticker = Ticker(self.tick, self.config.tick_period)
        self.clients: Set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        logger.info(
            "Starting %d car(s) over %d floors with %s dispatch",
            self.config.car_count,
            self.config.floor_count,
            self.config.dispatcher,
        )
        await self.ticker.start()

    async def stop(self) -> None:
        await self.ticker.stop()

    async def tick(self) -> None:
        async with self._lock:
            self.simulation.step()
            payload = self.current_state()
        await self.broadcast(payload)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except (WebSocketDisconnect, RuntimeError):
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        return {
            "time": self.simulation.current_time,
            "building": self.simulation.building.snapshot(),
            "dispatcher": self.simulation.building.dispatcher_name,
            "tick_period": self.config.tick_period,
        }

    def car_state(self, car_id: int) -> dict:
        self._require_car(car_id)
        return self.simulation.building.snapshot(car_id)

    async def request_service(self, car_id: int, floor: int, direction: Direction) -> dict:
        self._require_car(car_id)
        async with self._lock:
            self.simulation.request_service(car_id, floor, direction)
            return self.simulation.building.snapshot(car_id)

    async def set_dispatcher(self, name: str) -> dict:
        async with self._lock:
            self.simulation.building.set_dispatcher(name)
            return self.current_state()

    def _require_car(self, car_id: int) -> None:
        if not self.simulation.building.has_car(car_id):
            raise HTTPException(status_code=404, detail=f"Unknown car {car_id}")


manager = SimulationManager()
app = FastAPI(title="liftscan Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.get("/cars/{car_id}")
async def get_car(car_id: int) -> dict:
    return manager.car_state(car_id)


@app.post("/cars/{car_id}/requests")
async def request_service(car_id: int, request: ServiceRequest) -> dict:
    try:
        return await manager.request_service(car_id, request.floor, Direction.parse(request.direction))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/dispatcher")
async def set_dispatcher(selection: DispatcherSelection) -> dict:
    try:
        return await manager.set_dispatcher(selection.name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
