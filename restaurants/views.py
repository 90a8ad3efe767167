from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.notifications import MemoryNotifier
from core.query import RESTAURANT_SEARCH_FIELDS, paginate
from core.store import get_store
from core.views import mutation_response, page_response, query_from_params
from core.workflow import MutationWorkflow
from .serializers import RestaurantSerializer


class RestaurantViewSet(viewsets.ViewSet):
    """JSON access to the restaurant collection.

    The list takes search/status/page query parameters and returns one
    page. Mutations go through the same workflow as the HTML forms.
    """
    lookup_value_regex = '[^/]+'

    def _workflow(self, request):
        return MutationWorkflow(
            notifier=MemoryNotifier(),
            token=request.admin_session.token)

    def list(self, request):
        query = query_from_params(request.query_params)
        page = paginate(get_store().restaurants, query, RESTAURANT_SEARCH_FIELDS)
        return page_response(page, query, RestaurantSerializer)

    def retrieve(self, request, pk=None):
        restaurant = get_store().get_restaurant(pk)
        if restaurant is None:
            return Response({
                'success': False,
                'message': 'Restaurant not found'
            }, status=status.HTTP_404_NOT_FOUND)
        return Response(RestaurantSerializer(restaurant).data)

    def create(self, request):
        result = self._workflow(request).create_restaurant(request.data)
        return mutation_response(
            result, status.HTTP_201_CREATED, RestaurantSerializer)

    def partial_update(self, request, pk=None):
        result = self._workflow(request).update_restaurant(pk, request.data)
        return mutation_response(result, serializer_class=RestaurantSerializer)

    def destroy(self, request, pk=None):
        result = self._workflow(request).delete_restaurant(pk)
        return mutation_response(result)

    @action(detail=True, methods=['post'])
    def block(self, request, pk=None):
        result = self._workflow(request).block_restaurant(pk)
        return mutation_response(result, serializer_class=RestaurantSerializer)

    @action(detail=True, methods=['post'])
    def unblock(self, request, pk=None):
        result = self._workflow(request).unblock_restaurant(pk)
        return mutation_response(result, serializer_class=RestaurantSerializer)
