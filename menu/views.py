from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.notifications import MemoryNotifier
from core.query import CATEGORY_SEARCH_FIELDS, paginate
from core.store import get_store
from core.views import mutation_response, page_response, query_from_params
from core.workflow import MutationWorkflow
from .serializers import CategorySerializer


class CategoryViewSet(viewsets.ViewSet):
    """JSON access to dish categories"""
    lookup_value_regex = '[^/]+'

    def _workflow(self, request):
        return MutationWorkflow(
            notifier=MemoryNotifier(),
            token=request.admin_session.token)

    def list(self, request):
        query = query_from_params(request.query_params)
        page = paginate(get_store().categories, query, CATEGORY_SEARCH_FIELDS)
        return page_response(page, query, CategorySerializer)

    def retrieve(self, request, pk=None):
        category = get_store().get_category(pk)
        if category is None:
            return Response({
                'success': False,
                'message': 'Category not found'
            }, status=status.HTTP_404_NOT_FOUND)
        return Response(CategorySerializer(category).data)

    def create(self, request):
        result = self._workflow(request).create_category(request.data)
        return mutation_response(
            result, status.HTTP_201_CREATED, CategorySerializer)

    def partial_update(self, request, pk=None):
        result = self._workflow(request).update_category(pk, request.data)
        return mutation_response(result, serializer_class=CategorySerializer)

    def destroy(self, request, pk=None):
        result = self._workflow(request).delete_category(pk)
        return mutation_response(result)

    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """Flip a category between active and inactive"""
        result = self._workflow(request).toggle_category(pk)
        return mutation_response(result, serializer_class=CategorySerializer)
