# -*- coding: utf-8 -*-
from typing import List, Optional

import gradio as gr

from route_provider.container import get_container
from route_provider.domain.models import QueryResponse
from route_provider.observability import configure_logging
from route_provider.ports.graph import RouteGraphPort
from route_provider.services import RouteRequestHandler

configure_logging()

CONTAINER = get_container()
HANDLER: RouteRequestHandler = CONTAINER.resolve(RouteRequestHandler)
ACADEMIES: List[str] = list(CONTAINER.resolve(RouteGraphPort).academies())


def _format_response(response: QueryResponse) -> str:
    if response.is_success:
        return f"✅ {response.body}"
    if response.status_code == 400:
        return f"❌ Requête invalide : {response.body}"
    if response.status_code == 422:
        return f"⚠️ Limite de parcours atteinte : {response.body}"
    return "💥 Erreur interne, voir les logs."


def _limit(value: Optional[float]) -> Optional[int]:
    return None if value is None else int(value)


def ui_route_distance(stops: str) -> str:
    if not stops or not stops.strip():
        return "❌ Itinéraire vide"
    return _format_response(HANDLER.calculate_route_distance({"stops": stops}))


def ui_shortest_route(start: str, end: str) -> str:
    return _format_response(
        HANDLER.find_shortest_route_distance(
            {"starting_academy": start, "destination_academy": end}
        )
    )


def ui_stop_limit(start: str, end: str, stop_limit: Optional[float]) -> str:
    return _format_response(
        HANDLER.count_routes_with_stop_limit(
            {
                "starting_academy": start,
                "destination_academy": end,
                "stop_limit": _limit(stop_limit),
            }
        )
    )


def ui_exact_stops(start: str, end: str, exact_stops: Optional[float]) -> str:
    return _format_response(
        HANDLER.count_routes_with_exact_stops(
            {
                "starting_academy": start,
                "destination_academy": end,
                "exact_stops": _limit(exact_stops),
            }
        )
    )


def ui_distance_limit(start: str, end: str, distance_limit: Optional[float]) -> str:
    return _format_response(
        HANDLER.count_routes_with_distance_limit(
            {
                "starting_academy": start,
                "destination_academy": end,
                "distance_limit": _limit(distance_limit),
            }
        )
    )


def _academy_pair():
    with gr.Row():
        start = gr.Dropdown(ACADEMIES, value=ACADEMIES[0], label="🏫 Départ")
        end = gr.Dropdown(ACADEMIES, value=ACADEMIES[-1], label="🎯 Arrivée")
    return start, end


with gr.Blocks(title="Route Provider") as app:
    gr.Markdown("# 🧭 Route Provider\nRequêtes sur le graphe des académies.")

    with gr.Tab("Distance d'un itinéraire"):
        stops_in = gr.Textbox(label="Étapes (ex. ABC ou A-B-C)")
        btn_distance = gr.Button("📏 Calculer")
        out_distance = gr.Textbox(label="Résultat")
        btn_distance.click(ui_route_distance, inputs=stops_in, outputs=out_distance)

    with gr.Tab("Plus court chemin"):
        sp_start, sp_end = _academy_pair()
        btn_shortest = gr.Button("🚀 Chercher")
        out_shortest = gr.Textbox(label="Résultat")
        btn_shortest.click(
            ui_shortest_route, inputs=[sp_start, sp_end], outputs=out_shortest
        )

    with gr.Tab("Arrêts maximum"):
        sl_start, sl_end = _academy_pair()
        sl_limit = gr.Number(value=3, precision=0, label="Arrêts max")
        btn_stop_limit = gr.Button("🔢 Compter")
        out_stop_limit = gr.Textbox(label="Résultat")
        btn_stop_limit.click(
            ui_stop_limit, inputs=[sl_start, sl_end, sl_limit], outputs=out_stop_limit
        )

    with gr.Tab("Arrêts exacts"):
        es_start, es_end = _academy_pair()
        es_stops = gr.Number(value=4, precision=0, label="Arrêts exacts")
        btn_exact = gr.Button("🔢 Compter")
        out_exact = gr.Textbox(label="Résultat")
        btn_exact.click(
            ui_exact_stops, inputs=[es_start, es_end, es_stops], outputs=out_exact
        )

    with gr.Tab("Distance maximum"):
        dl_start, dl_end = _academy_pair()
        dl_limit = gr.Number(value=30, precision=0, label="Distance max")
        btn_distance_limit = gr.Button("🔢 Compter")
        out_distance_limit = gr.Textbox(label="Résultat")
        btn_distance_limit.click(
            ui_distance_limit,
            inputs=[dl_start, dl_end, dl_limit],
            outputs=out_distance_limit,
        )


if __name__ == "__main__":
    app.launch()
