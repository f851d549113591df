# user/schema.py
import graphene
from graphene_django import DjangoObjectType

from . import services
from .models import User


class UserType(DjangoObjectType):
    class Meta:
        model = User
        name = "User"
        fields = ("id", "name", "email", "created_at")


class AuthPayload(graphene.ObjectType):
    token = graphene.String(required=True)
    user = graphene.Field(UserType, required=True)


class Register(graphene.Mutation):
    class Arguments:
        name = graphene.String(required=True)
        email = graphene.String(required=True)
        password = graphene.String(required=True)

    Output = AuthPayload

    def mutate(root, info, name, email, password):
        result = services.register_user(info.context.store, name=name, email=email, password=password)
        return AuthPayload(token=result.token, user=result.user)


class Login(graphene.Mutation):
    class Arguments:
        email = graphene.String(required=True)
        password = graphene.String(required=True)

    Output = AuthPayload

    def mutate(root, info, email, password):
        result = services.login_user(info.context.store, email=email, password=password)
        return AuthPayload(token=result.token, user=result.user)


class Query(graphene.ObjectType):
    me = graphene.Field(UserType)

    def resolve_me(root, info):
        return services.current_user(info.context)


class Mutation(graphene.ObjectType):
    register = Register.Field()
    login = Login.Field()
