import graphene

import user.schema
import wishlist.schema


class Query(user.schema.Query, wishlist.schema.Query, graphene.ObjectType):
    pass


class Mutation(user.schema.Mutation, wishlist.schema.Mutation, graphene.ObjectType):
    pass


schema = graphene.Schema(query=Query, mutation=Mutation)
