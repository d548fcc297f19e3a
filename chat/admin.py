from django.contrib import admin
from .models import ChatMessage


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ('id', 'ride', 'user', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__email', 'ride__id')
    readonly_fields = ('ride', 'user', 'content', 'created_at')

    # Messages are immutable once sent.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
