from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from club.core.deps import get_topic_service, require_user
from club.schemas.topics import TopicCreated, TopicPage, TopicRead, TopicUpsert
from club.services.permissions import Actor
from club.services.results import ERROR_NOT_FOUND, ERROR_PERMISSION, OperationResult, PagedResult
from club.services.topic_service import TopicService

router = APIRouter()

_STATUS_BY_ERROR = {ERROR_NOT_FOUND: 404, ERROR_PERMISSION: 403}


def _unwrap(result: OperationResult):
    if not result.ok:
        raise HTTPException(status_code=_STATUS_BY_ERROR.get(result.error, 400), detail=result.message)
    return result.value


def _page(result: PagedResult) -> TopicPage:
    return TopicPage(
        rows=[TopicRead.model_validate(t) for t in result.items],
        page_index=result.page_index,
        page_size=result.page_size,
        total=result.total,
    )


@router.get("", response_model=TopicPage)
def query_topics(
    category: Optional[str] = Query(None),
    recommend: Optional[bool] = Query(None),
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1),
    service: TopicService = Depends(get_topic_service),
):
    return _page(service.query(category, recommend, page, size))


@router.post("", status_code=201, response_model=TopicCreated)
def create_topic(
    payload: TopicUpsert,
    actor: Actor = Depends(require_user),
    service: TopicService = Depends(get_topic_service),
):
    topic_id = _unwrap(service.add(payload.category, payload.title, payload.content, actor.user_id))
    return TopicCreated(id=topic_id)


@router.get("/no-comment", response_model=list[TopicRead])
def no_comment_topics(count: int = Query(10, ge=1, le=100), service: TopicService = Depends(get_topic_service)):
    return [TopicRead.model_validate(t) for t in service.query_no_comment_topic_list(count)]


@router.get("/users/{user_id}/created", response_model=TopicPage)
def created_topics(
    user_id: int,
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1),
    service: TopicService = Depends(get_topic_service),
):
    return _page(service.query_created_topic_list(user_id, page, size))


@router.get("/users/{user_id}/commented", response_model=TopicPage)
def commented_topics(
    user_id: int,
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1),
    service: TopicService = Depends(get_topic_service),
):
    return _page(service.query_commented_topic_list(user_id, page, size))


@router.get("/users/{user_id}/collected", response_model=TopicPage)
def collected_topics(
    user_id: int,
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1),
    service: TopicService = Depends(get_topic_service),
):
    return _page(service.query_collected_topic_list(user_id, page, size))


@router.get("/users/{user_id}/recent-created", response_model=list[TopicRead])
def recent_created_topics(
    user_id: int,
    count: int = Query(10, ge=1, le=100),
    exclude: Optional[list[int]] = Query(None),
    service: TopicService = Depends(get_topic_service),
):
    return [TopicRead.model_validate(t) for t in service.query_recent_created_topic_list(count, user_id, exclude or ())]


@router.get("/users/{user_id}/recent-commented", response_model=list[TopicRead])
def recent_commented_topics(
    user_id: int,
    count: int = Query(10, ge=1, le=100),
    service: TopicService = Depends(get_topic_service),
):
    return [TopicRead.model_validate(t) for t in service.query_recent_commented_topic_list(count, user_id)]


@router.get("/{topic_id}", response_model=TopicRead)
def get_topic(topic_id: int, service: TopicService = Depends(get_topic_service)):
    topic = service.get(topic_id)
    if topic is None:
        raise HTTPException(status_code=404, detail="Topic does not exist")
    service.increase_visit_count(topic_id)
    return TopicRead.model_validate(topic)


@router.put("/{topic_id}", response_model=TopicRead)
def edit_topic(
    topic_id: int,
    payload: TopicUpsert,
    actor: Actor = Depends(require_user),
    service: TopicService = Depends(get_topic_service),
):
    topic = _unwrap(service.edit(topic_id, payload.category, payload.title, payload.content))
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}")
def delete_topic(
    topic_id: int,
    actor: Actor = Depends(require_user),
    service: TopicService = Depends(get_topic_service),
):
    _unwrap(service.delete(topic_id))
    return {"status": "deleted"}


@router.post("/{topic_id}/recommend", response_model=TopicRead)
def toggle_recommend(topic_id: int, service: TopicService = Depends(get_topic_service)):
    return TopicRead.model_validate(_unwrap(service.toggle_recommend(topic_id)))


@router.post("/{topic_id}/top", response_model=TopicRead)
def toggle_top(topic_id: int, service: TopicService = Depends(get_topic_service)):
    return TopicRead.model_validate(_unwrap(service.toggle_top(topic_id)))


@router.post("/{topic_id}/lock", response_model=TopicRead)
def toggle_lock(topic_id: int, service: TopicService = Depends(get_topic_service)):
    return TopicRead.model_validate(_unwrap(service.toggle_lock(topic_id)))
