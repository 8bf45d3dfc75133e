from fastapi import FastAPI, HTTPException, Body
from typing import Any, Dict, List
import logging

from ..config import load_config
from ..kinship import find_all_relationships, find_relationship
from ..models import Person
from ..relationship import all_shortest_paths
from ..reports import ancestors_with_relationship, descendants_with_relationship, siblings_with_relationship
from ..stats import family_statistics
from ..traversal import all_blood_relative_ids

cfg = load_config()
logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))

app = FastAPI(title="familytree-py")

# No storage here: every request carries the full person collection, so two
# queries in flight never share state.


def _load_people(payload: Dict[str, Any]) -> Dict[str, Person]:
    raw = payload.get("people")
    if not isinstance(raw, list):
        raise HTTPException(status_code=400, detail="'people' must be a list of persons")
    try:
        persons = [Person.from_dict(p) for p in raw]
    except (AttributeError, TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=f"malformed person: {exc}")
    return {p.id: p for p in persons}


def _require_id(payload: Dict[str, Any], key: str, index: Dict[str, Person]) -> str:
    pid = payload.get(key)
    if not pid:
        raise HTTPException(status_code=400, detail=f"'{key}' is required")
    if pid not in index:
        raise HTTPException(status_code=404, detail=f"person {pid} not found")
    return pid


def _pair(payload: Dict[str, Any]):
    index = _load_people(payload)
    id1 = _require_id(payload, "person1_id", index)
    id2 = _require_id(payload, "person2_id", index)
    if id1 == id2:
        raise HTTPException(status_code=400, detail="person1_id and person2_id are the same person")
    return index, id1, id2


def _person_ref(p: Person) -> Dict[str, str]:
    return {"id": p.id, "name": p.full_name}


@app.get("/")
def index():
    return {
        "name": app.title,
        "endpoints": sorted({r.path for r in app.routes if getattr(r, "methods", None) and "POST" in r.methods}),
    }


@app.post("/relationship")
def relationship(payload: Dict[str, Any] = Body(...)):
    index, id1, id2 = _pair(payload)
    logging.info("relationship requested for %s -> %s over %d persons", id1, id2, len(index))
    rel = find_relationship(id1, id2, index, max_depth=cfg.max_path_depth)
    return rel.to_dict()


@app.post("/relationships")
def relationships(payload: Dict[str, Any] = Body(...)):
    index, id1, id2 = _pair(payload)
    rels = find_all_relationships(id1, id2, index, max_depth=cfg.max_path_depth)
    return {"relationships": [r.to_dict() for r in rels]}


@app.post("/paths")
def paths(payload: Dict[str, Any] = Body(...)):
    index, id1, id2 = _pair(payload)
    return {"paths": all_shortest_paths(index, id1, id2, max_paths=cfg.max_paths, max_depth=cfg.max_path_depth)}


@app.post("/ancestors")
def ancestors(payload: Dict[str, Any] = Body(...)):
    index = _load_people(payload)
    pid = _require_id(payload, "person_id", index)
    return {"ancestors": [{**_person_ref(e["person"]), "relationship": e["relationship"]} for e in ancestors_with_relationship(pid, index)]}


@app.post("/descendants")
def descendants(payload: Dict[str, Any] = Body(...)):
    index = _load_people(payload)
    pid = _require_id(payload, "person_id", index)
    return {
        "descendants": [
            {**_person_ref(e["person"]), "relationship": e["relationship"], "generation": e["generation"]}
            for e in descendants_with_relationship(pid, index)
        ]
    }


@app.post("/siblings")
def siblings(payload: Dict[str, Any] = Body(...)):
    index = _load_people(payload)
    pid = _require_id(payload, "person_id", index)
    return {"siblings": [{**_person_ref(e["person"]), "relationship": e["relationship"]} for e in siblings_with_relationship(pid, index)]}


@app.post("/blood-relatives")
def blood_relatives(payload: Dict[str, Any] = Body(...)):
    index = _load_people(payload)
    pid = _require_id(payload, "person_id", index)
    ids: List[str] = sorted(all_blood_relative_ids(pid, index))
    return {"ids": ids}


@app.post("/statistics")
def statistics(payload: Dict[str, Any] = Body(...)):
    index = _load_people(payload)
    return family_statistics(index).to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
