from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .conf import items_per_page
from .gateways import get_gateway
from .query import QueryState, STATUS_FILTER_ALL
from .serializers import HealthCheckSerializer
from .store import get_store
from .workflow import FAILED, INVALID, NOT_FOUND


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Health check endpoint"""
    store = get_store()

    data = {
        'status': 'healthy',
        'timestamp': timezone.now(),
        'gateway': get_gateway().get_gateway_name(),
        'restaurants': len(store.restaurants),
        'categories': len(store.categories),
        'service': 'restaurant-platform-admin',
        'version': '1.0.0'
    }

    serializer = HealthCheckSerializer(data)
    return Response(serializer.data)


# ============ Shared responses for the collection APIs ============

OUTCOME_STATUS = {
    INVALID: status.HTTP_400_BAD_REQUEST,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FAILED: status.HTTP_502_BAD_GATEWAY,
}


def query_from_params(params):
    """Stateless query for API calls: each request carries all parameters"""
    return QueryState.from_dict({
        'search_term': params.get('search', '').strip(),
        'status_filter': params.get('status', STATUS_FILTER_ALL),
        'current_page': params.get('page', 1),
    }, items_per_page())


def page_response(page, query, serializer_class):
    return Response({
        'results': serializer_class(page.items, many=True).data,
        'page': page.number,
        'totalPages': page.total_pages,
        'count': page.filtered_count,
        'totalCount': page.total_count,
        'search': query.search_term,
        'status': query.status_filter,
    })


def mutation_response(result, success_status=status.HTTP_200_OK,
                      serializer_class=None):
    """JSON reply for a MutationResult"""
    if result.success:
        data = {'success': True, 'message': result.message}
        if serializer_class is not None and result.entity is not None:
            data['data'] = serializer_class(result.entity).data
        return Response(data, status=success_status)

    data = {'success': False, 'message': result.message}
    if result.errors:
        data['errors'] = result.errors
    return Response(data, status=OUTCOME_STATUS[result.outcome])
